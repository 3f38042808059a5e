"""Provider configuration: immutable dataclass validated at construction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from wordpress_oauth.core.errors import ConfigError


@dataclass(frozen=True, slots=True)
class WordPressConfig:
    """Credentials and endpoints for one WordPress OAuth application.

    Example:
        WordPressConfig(
            client_id="12345",
            client_secret="...",
            redirect_uri="https://example.com/auth/wordpress/callback",
            host="https://public-api.wordpress.com/oauth2",
            api_me="https://public-api.wordpress.com/rest/v1/me",
        )
    """

    client_id: str
    client_secret: str = field(repr=False)
    redirect_uri: str
    host: str
    api_me: str

    def __post_init__(self) -> None:
        """Reject missing or non-string values and normalize the host."""
        invalid = [
            f.name for f in fields(self)
            if getattr(self, f.name) is not None and not isinstance(getattr(self, f.name), str)
        ]
        if invalid:
            raise ConfigError(
                f"WordPress configuration values must be strings: {', '.join(invalid)}",
                invalid=tuple(invalid),
            )
        missing = [f.name for f in fields(self) if not (getattr(self, f.name) or "").strip()]
        if missing:
            raise ConfigError(
                f"Missing required WordPress configuration: {', '.join(missing)}",
                missing=tuple(missing),
            )
        # "<host>/authorize" must not end up with a double slash
        object.__setattr__(self, "host", self.host.rstrip("/"))

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> WordPressConfig:
        """Build from a framework-style services mapping.

        Accepts ``redirect`` or ``redirect_uri`` for the callback URL. Numeric
        values (WordPress.com client IDs are numbers) are read as strings.
        """
        return cls(
            client_id=_text(config.get("client_id")),
            client_secret=_text(config.get("client_secret")),
            redirect_uri=_text(config.get("redirect") or config.get("redirect_uri")),
            host=_text(config.get("host")),
            api_me=_text(config.get("api_me")),
        )


def _text(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return "" if value is None else value
