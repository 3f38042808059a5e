"""Profile fetch from the provider's "me" endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wordpress_oauth.core.http import decode_json_object

logger = logging.getLogger("wordpress_oauth.profile")


def fetch_user(client: httpx.Client, api_me_url: str, access_token: str) -> dict[str, Any]:
    """Fetch the raw user profile for an access token.

    The status code is not checked here; the client decides whether error
    statuses raise (the default client does).

    Raises:
        httpx.TransportError: On network failure, unchanged.
        ParseError: If the body is not a JSON object.
    """
    logger.debug("Fetching user profile from %s", api_me_url)
    response = client.get(
        api_me_url,
        headers={
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        },
    )
    return decode_json_object(response, what="profile")
