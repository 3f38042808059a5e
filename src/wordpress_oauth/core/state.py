"""CSRF state nonce generation and comparison."""

from __future__ import annotations

import hmac
import secrets

from wordpress_oauth.core.errors import InvalidStateError

_STATE_BYTES = 30  # 40 URL-safe characters


def generate_state() -> str:
    """Random state value for one authorization attempt."""
    return secrets.token_urlsafe(_STATE_BYTES)


def verify_state(received: str | None, expected: str | None) -> None:
    """Check the state returned by the provider against the one issued.

    Raises:
        InvalidStateError: If either value is missing or empty, or they differ.
    """
    if not received or not expected:
        raise InvalidStateError("Missing OAuth state")
    if not hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8")):
        raise InvalidStateError("Invalid OAuth state")
