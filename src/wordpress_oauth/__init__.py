"""wordpress-oauth: WordPress.com OAuth 2.0 authorization code client."""

__version__ = "0.1.0"

from wordpress_oauth.config import WordPressConfig
from wordpress_oauth.core.errors import (
    ConfigError,
    InvalidStateError,
    MissingRequiredFieldError,
    OAuthError,
    ParseError,
    TokenExchangeError,
    TransportError,
)
from wordpress_oauth.core.schemas import AuthorizationRedirect, OAuthUser
from wordpress_oauth.providers.base import OAuthProvider
from wordpress_oauth.providers.wordpress import WordPressProvider

__all__ = [
    "AuthorizationRedirect",
    "ConfigError",
    "InvalidStateError",
    "MissingRequiredFieldError",
    "OAuthError",
    "OAuthProvider",
    "OAuthUser",
    "ParseError",
    "TokenExchangeError",
    "TransportError",
    "WordPressConfig",
    "WordPressProvider",
]
