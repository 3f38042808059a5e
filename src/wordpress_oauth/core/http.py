"""HTTP helpers shared by the token exchange and the profile fetch."""

from __future__ import annotations

from typing import Any

import httpx

from wordpress_oauth.core.errors import ParseError

DEFAULT_TIMEOUT = 10.0


def _raise_on_error_status(response: httpx.Response) -> None:
    response.raise_for_status()


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Default client: raises ``httpx.HTTPStatusError`` on 4xx/5xx responses."""
    return httpx.Client(
        timeout=timeout,
        event_hooks={"response": [_raise_on_error_status]},
    )


def decode_json_object(response: httpx.Response, *, what: str) -> dict[str, Any]:
    """Decode a response body that must be a JSON object.

    Raises:
        ParseError: If the body is not JSON, or is JSON but not an object.
    """
    try:
        data = response.json()
    except ValueError as e:
        raise ParseError(
            f"Invalid JSON in {what} response: {e}",
            status_code=502,
        ) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object in {what} response, got {type(data).__name__}",
            status_code=502,
        )
    return data
