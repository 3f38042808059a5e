"""Vulture whitelist: false positives that are actually used by callers."""

# ---------------------------------------------------------------------------
# Public API on providers (called by applications, not internally)
# ---------------------------------------------------------------------------
from wordpress_oauth.providers.base import OAuthProvider
from wordpress_oauth.providers.wordpress import WordPressProvider

OAuthProvider.with_scopes
OAuthProvider.with_parameters
OAuthProvider.as_stateless
OAuthProvider.authorization_redirect
OAuthProvider.user
OAuthProvider.user_from_token
WordPressProvider.from_config

# ---------------------------------------------------------------------------
# Dataclass fields read by callers
# ---------------------------------------------------------------------------
from wordpress_oauth.core.schemas import AuthorizationRedirect, OAuthUser

OAuthUser.nickname
OAuthUser.avatar
OAuthUser.refresh_token
OAuthUser.expires_in
OAuthUser.approved_scopes
AuthorizationRedirect.url
