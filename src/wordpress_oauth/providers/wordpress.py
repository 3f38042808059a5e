"""WordPress.com OAuth 2.0 provider."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from wordpress_oauth.config import WordPressConfig
from wordpress_oauth.core.mapping import map_user_to_object
from wordpress_oauth.core.profile import fetch_user
from wordpress_oauth.core.schemas import OAuthUser
from wordpress_oauth.core.tokens import token_fields, token_url
from wordpress_oauth.core.urls import build_auth_url
from wordpress_oauth.providers.base import OAuthProvider


@dataclass(frozen=True)
class WordPressProvider(OAuthProvider):
    """WordPress OAuth provider.

    No default scopes. Pass ``extra_scopes`` (e.g. ``("global",)``) to
    request more than the default per-blog access.

    Example::

        provider = WordPressProvider.from_config({
            "client_id": "...",
            "client_secret": "...",
            "redirect": "https://example.com/auth/wordpress/callback",
            "host": "https://public-api.wordpress.com/oauth2",
            "api_me": "https://public-api.wordpress.com/rest/v1/me",
        })
    """

    config: WordPressConfig

    @classmethod
    def from_config(
        cls, config: WordPressConfig | Mapping[str, Any], **kwargs: Any,
    ) -> WordPressProvider:
        """Build a provider from a config object or a services mapping."""
        if not isinstance(config, WordPressConfig):
            config = WordPressConfig.from_mapping(config)
        return cls(config, **kwargs)

    @property
    def name(self) -> str:
        return "wordpress"

    @property
    def client_id(self) -> str:
        return self.config.client_id

    @property
    def client_secret(self) -> str:
        return self.config.client_secret

    @property
    def redirect_uri(self) -> str:
        return self.config.redirect_uri

    def get_auth_url(self, state: str | None) -> str:
        return build_auth_url(
            self.config.host,
            state,
            client_id=self.client_id,
            redirect_uri=self.redirect_uri,
            scopes=self.scopes,
            scope_separator=self.SCOPE_SEPARATOR,
            parameters=dict(self.parameters),
        )

    def get_token_url(self) -> str:
        return token_url(self.config.host)

    def get_token_fields(self, code: str) -> dict[str, str]:
        """WordPress requires an explicit grant_type on the token request."""
        return token_fields(
            code,
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
        )

    def get_user_by_token(self, token: str) -> dict[str, Any]:
        """Fetch the WordPress profile from the configured "me" endpoint."""
        with self._client() as client:
            return fetch_user(client, self.config.api_me, token)

    def map_user_to_object(self, raw: Mapping[str, Any]) -> OAuthUser:
        return map_user_to_object(raw)
