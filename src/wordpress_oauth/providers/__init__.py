"""WordPress OAuth providers."""

from wordpress_oauth.providers.base import OAuthProvider
from wordpress_oauth.providers.wordpress import WordPressProvider

__all__ = [
    "OAuthProvider",
    "WordPressProvider",
]
