"""Shared fixtures for the WordPress provider tests."""

from collections.abc import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from wordpress_oauth import WordPressConfig, WordPressProvider

HOST = "http://localhost"
API_ME = "http://localhost/me"


@pytest.fixture
def config() -> WordPressConfig:
    return WordPressConfig(
        client_id="client_id",
        client_secret="client_secret",
        redirect_uri="redirect",
        host=HOST,
        api_me=API_ME,
    )


@pytest.fixture
def provider(config: WordPressConfig) -> WordPressProvider:
    return WordPressProvider(config)


class MockProvider:
    """Routes token and profile requests to canned responses and records them."""

    def __init__(self, *, token: httpx.Response | None = None, profile: httpx.Response | None = None):
        self.token = token
        self.profile = profile
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/token" and self.token is not None:
            return self.token
        if request.url.path == "/me" and self.profile is not None:
            return self.profile
        return httpx.Response(404, json={"error": "not_found"})

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    @staticmethod
    def form(request: httpx.Request) -> dict[str, str]:
        """Decode a form-encoded request body into single values."""
        return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


@pytest.fixture
def mock_provider(config: WordPressConfig) -> Callable[..., tuple[WordPressProvider, MockProvider]]:
    """Build a provider whose injected client talks to a MockProvider."""

    def _make(
        *, token: dict | None = None, profile: dict | None = None, **kwargs,
    ) -> tuple[WordPressProvider, MockProvider]:
        handler = MockProvider(
            token=httpx.Response(200, json=token) if token is not None else None,
            profile=httpx.Response(200, json=profile) if profile is not None else None,
        )
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return WordPressProvider(config, http_client=client, **kwargs), handler

    return _make
