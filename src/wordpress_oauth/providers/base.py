"""OAuth provider base class: the interface a provider must implement.

The base class also carries the generic authorization code flow (state
check, code exchange, profile fetch, token attachment) as template methods
built on top of that interface.
"""

from __future__ import annotations

import abc
import dataclasses
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx

from wordpress_oauth.core.errors import InvalidStateError, TokenExchangeError
from wordpress_oauth.core.http import DEFAULT_TIMEOUT, create_http_client, decode_json_object
from wordpress_oauth.core.schemas import AuthorizationRedirect, OAuthUser
from wordpress_oauth.core.state import generate_state, verify_state
from wordpress_oauth.core.tokens import base_token_fields
from wordpress_oauth.core.urls import STANDARD_KEYS

logger = logging.getLogger("wordpress_oauth.providers")


@dataclass(frozen=True, kw_only=True)
class OAuthProvider(abc.ABC):
    """Abstract base for OAuth 2.0 authorization code providers.

    Subclasses must implement:
        name                : provider identifier (e.g. "wordpress")
        client_id           : OAuth application client ID
        client_secret       : OAuth application secret
        redirect_uri        : callback URL registered with the provider
        get_auth_url()      : authorization endpoint URL for a state value
        get_token_url()     : token exchange endpoint
        get_user_by_token() : fetch the raw profile for an access token
        map_user_to_object(): normalize a raw profile into an OAuthUser

    ``http_client`` is used as-is when given and never closed; otherwise a
    short-lived client is created per request.
    """

    extra_scopes: tuple[str, ...] = ()
    parameters: tuple[tuple[str, str], ...] = ()
    stateless: bool = False
    http_client: httpx.Client | None = field(default=None, repr=False, compare=False)
    http_timeout: float = field(default=DEFAULT_TIMEOUT, compare=False)

    REQUIRED_SCOPES: ClassVar[tuple[str, ...]] = ()
    SCOPE_SEPARATOR: ClassVar[str] = " "

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @property
    @abc.abstractmethod
    def client_id(self) -> str: ...

    @property
    @abc.abstractmethod
    def client_secret(self) -> str: ...

    @property
    @abc.abstractmethod
    def redirect_uri(self) -> str: ...

    @property
    def scopes(self) -> tuple[str, ...]:
        """Combined required + extra scopes (deduplicated, order-preserving)."""
        seen: set[str] = set()
        result: list[str] = []
        for s in self.REQUIRED_SCOPES + self.extra_scopes:
            if s not in seen:
                seen.add(s)
                result.append(s)
        return tuple(result)

    # ------------------------------------------------------------------
    # Capability interface
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def get_auth_url(self, state: str | None) -> str:
        """Authorization URL the user is redirected to."""
        ...

    @abc.abstractmethod
    def get_token_url(self) -> str: ...

    def get_token_fields(self, code: str) -> dict[str, str]:
        """Token request body. Providers add their own fields on top."""
        return base_token_fields(
            code,
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
        )

    @abc.abstractmethod
    def get_user_by_token(self, token: str) -> dict[str, Any]:
        """Fetch the raw user profile from the provider API."""
        ...

    @abc.abstractmethod
    def map_user_to_object(self, raw: Mapping[str, Any]) -> OAuthUser: ...

    # ------------------------------------------------------------------
    # Copies with different request options
    # ------------------------------------------------------------------

    def with_scopes(self, *scopes: str) -> OAuthProvider:
        return dataclasses.replace(self, extra_scopes=self.extra_scopes + scopes)

    def with_parameters(self, **parameters: str) -> OAuthProvider:
        """Copy sending extra query parameters on the authorization URL.

        Raises:
            ValueError: If a parameter would replace a standard OAuth query key.
        """
        reserved = STANDARD_KEYS.intersection(parameters)
        if reserved:
            raise ValueError(
                f"Authorization parameters cannot override: {', '.join(sorted(reserved))}"
            )
        merged = {**dict(self.parameters), **parameters}
        return dataclasses.replace(self, parameters=tuple(merged.items()))

    def as_stateless(self) -> OAuthProvider:
        return dataclasses.replace(self, stateless=True)

    # ------------------------------------------------------------------
    # Authorization code flow
    # ------------------------------------------------------------------

    @contextmanager
    def _client(self) -> Iterator[httpx.Client]:
        if self.http_client is not None:
            yield self.http_client
            return
        with create_http_client(timeout=self.http_timeout) as client:
            yield client

    def authorization_redirect(self, state: str | None = None) -> AuthorizationRedirect:
        """Build the redirect to the provider's consent screen.

        A fresh state is generated when none is given, unless the provider is
        stateless. The caller must keep the returned state until the callback.
        """
        if self.stateless:
            state = None
        elif state is None:
            state = generate_state()
        return AuthorizationRedirect(url=self.get_auth_url(state), state=state)

    def get_access_token_response(self, code: str) -> dict[str, Any]:
        """Exchange an authorization code for the provider's token response.

        Raises:
            httpx.TransportError: On network failure, unchanged.
            ParseError: If the body is not a JSON object.
        """
        url = self.get_token_url()
        logger.debug("Exchanging %s authorization code at %s", self.name, url)
        with self._client() as client:
            response = client.post(
                url,
                data=self.get_token_fields(code),
                headers={"Accept": "application/json"},
            )
            return decode_json_object(response, what="token")

    def user(
        self, *, code: str, state: str | None = None, expected_state: str | None = None,
    ) -> OAuthUser:
        """Complete the flow: check state, exchange code, fetch and map the user.

        Args:
            code: The authorization code from the callback.
            state: The state query parameter from the callback.
            expected_state: The state issued by ``authorization_redirect()``.

        Raises:
            InvalidStateError: If the state check fails (not for stateless providers).
            TokenExchangeError: If the token response has no access token.
        """
        if not self.stateless:
            try:
                verify_state(state, expected_state)
            except InvalidStateError:
                logger.warning("OAuth state check failed for %s", self.name)
                raise

        token_data = self.get_access_token_response(code)
        access_token = token_data.get("access_token")
        if not access_token:
            raise TokenExchangeError(
                "No access token in provider response",
                provider=self.name,
            )

        user = self.map_user_to_object(self.get_user_by_token(access_token))
        return user.with_token(
            access_token,
            refresh_token=token_data.get("refresh_token"),
            expires_in=token_data.get("expires_in"),
            approved_scopes=self._parse_approved_scopes(token_data.get("scope")),
        )

    def user_from_token(self, token: str) -> OAuthUser:
        """Fetch and map the user for an access token obtained elsewhere."""
        return self.map_user_to_object(self.get_user_by_token(token)).with_token(token)

    def _parse_approved_scopes(self, scope: Any) -> tuple[str, ...]:
        if not scope or not isinstance(scope, str):
            return ()
        return tuple(s for s in scope.split(self.SCOPE_SEPARATOR) if s)
