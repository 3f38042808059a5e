"""Result types: canonical user and authorization redirect."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class OAuthUser:
    """Normalized user returned by the provider.

    Profile fields are always strings, empty when the provider omitted them.
    Token fields are filled in after the code exchange, never by the mapper.
    """

    id: int
    nickname: str = ""
    name: str = ""
    email: str = ""
    avatar: str = ""
    raw: dict[str, Any] = field(default_factory=dict)
    token: str | None = None
    refresh_token: str | None = None
    expires_in: int | None = None
    approved_scopes: tuple[str, ...] = ()

    def with_token(
        self,
        token: str,
        *,
        refresh_token: str | None = None,
        expires_in: int | None = None,
        approved_scopes: tuple[str, ...] = (),
    ) -> OAuthUser:
        """Copy of this user carrying the provider token data."""
        return dataclasses.replace(
            self,
            token=token,
            refresh_token=refresh_token,
            expires_in=expires_in,
            approved_scopes=approved_scopes,
        )


@dataclass(frozen=True, slots=True)
class AuthorizationRedirect:
    """Where to send the user, and the state to hold until the callback.

    ``state`` is None for stateless providers.
    """

    url: str
    state: str | None = None
