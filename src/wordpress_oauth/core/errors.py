"""Error types raised by the WordPress OAuth client."""

from __future__ import annotations

import httpx

# Network failures are not wrapped; they surface as httpx's own exception.
TransportError = httpx.TransportError


class OAuthError(Exception):
    """Base OAuth error with an error code and HTTP status."""

    default_code: str = "oauth_error"
    default_status_code: int = 400

    def __init__(
        self, message: str, code: str | None = None, status_code: int | None = None, **extra,
    ):
        self.message = message
        self.code = code or self.default_code
        self.status_code = status_code or self.default_status_code
        self.extra = extra
        super().__init__(message)


class ConfigError(OAuthError):
    """Provider configuration is missing required values."""

    default_code = "invalid_config"
    default_status_code = 500


class ParseError(OAuthError):
    """Provider response body is not a JSON object."""

    default_code = "oauth_invalid_response"


class MissingRequiredFieldError(OAuthError):
    """Profile payload lacks a field the canonical user cannot do without."""

    default_code = "oauth_no_user_id"


class TokenExchangeError(OAuthError):
    """Token endpoint answered without an access token."""

    default_code = "oauth_exchange_failed"


class InvalidStateError(OAuthError):
    """State returned by the provider does not match the one issued."""

    default_code = "oauth_state_invalid"
