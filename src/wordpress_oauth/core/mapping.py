"""Normalize a raw WordPress profile into the canonical user record.

Each field resolves through an ordered chain of profile keys; the first key
present wins, otherwise the field is an empty string. ``name`` and ``email``
have two candidate keys because the provider's payload differs between API
versions; ``nickname`` and ``avatar`` only ever use one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from wordpress_oauth.core.errors import MissingRequiredFieldError
from wordpress_oauth.core.schemas import OAuthUser

ID_KEY = "ID"
NAME_KEYS = ("username", "user_login")
EMAIL_KEYS = ("email", "user_email")
NICKNAME_KEYS = ("display_name",)
AVATAR_KEYS = ("avatar_URL",)


def first_present(raw: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    """Value of the first key in ``keys`` that is present and not None."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value if isinstance(value, str) else str(value)
    return ""


def coerce_id(raw: Mapping[str, Any]) -> int:
    """Integer user ID from ``ID``.

    Raises:
        MissingRequiredFieldError: If ``ID`` is absent or not an integer.
    """
    value = raw.get(ID_KEY)
    if value is None:
        raise MissingRequiredFieldError(
            "Could not determine user ID from wordpress response", field=ID_KEY,
        )
    if isinstance(value, bool):
        raise MissingRequiredFieldError(
            f"User ID from wordpress is not numeric: {value!r}", field=ID_KEY,
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        try:
            value = float(value)
        except ValueError:
            raise MissingRequiredFieldError(
                f"User ID from wordpress is not numeric: {value!r}", field=ID_KEY,
            )
    if not isinstance(value, float):
        raise MissingRequiredFieldError(
            f"User ID from wordpress is not numeric: {value!r}", field=ID_KEY,
        )
    if not value.is_integer():
        raise MissingRequiredFieldError(
            f"User ID from wordpress is not an integer: {value!r}", field=ID_KEY,
        )
    return int(value)


def map_user_to_object(raw: Mapping[str, Any]) -> OAuthUser:
    """Map a raw profile to an OAuthUser. Token fields are left unset."""
    return OAuthUser(
        id=coerce_id(raw),
        nickname=first_present(raw, NICKNAME_KEYS),
        name=first_present(raw, NAME_KEYS),
        email=first_present(raw, EMAIL_KEYS),
        avatar=first_present(raw, AVATAR_KEYS),
        raw=dict(raw),
    )
