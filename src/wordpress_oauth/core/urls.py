"""Authorization URL construction."""

from __future__ import annotations

import urllib.parse
from collections.abc import Iterable, Mapping

STANDARD_KEYS = frozenset({"client_id", "redirect_uri", "response_type", "state", "scope"})


def authorize_url(host: str) -> str:
    return f"{host}/authorize"


def build_auth_url(
    host: str,
    state: str | None,
    *,
    client_id: str,
    redirect_uri: str,
    scopes: Iterable[str] = (),
    scope_separator: str = " ",
    parameters: Mapping[str, str] | None = None,
) -> str:
    """Build the full authorization URL with query params.

    ``scope`` is always sent, empty when nothing is requested. ``state`` is
    left out only when None is passed. Extra ``parameters`` are appended
    after the standard ones.

    Raises:
        ValueError: If ``parameters`` names one of the standard keys.
    """
    reserved = STANDARD_KEYS.intersection(parameters or ())
    if reserved:
        raise ValueError(
            f"Authorization parameters cannot override: {', '.join(sorted(reserved))}"
        )

    params = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
    }
    if state is not None:
        params["state"] = state
    params["scope"] = scope_separator.join(scopes)
    if parameters:
        params.update(parameters)
    return f"{authorize_url(host)}?{urllib.parse.urlencode(params)}"
