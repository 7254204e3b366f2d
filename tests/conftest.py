import sys
from pathlib import Path
from typing import Callable, List

import httpx
import pytest
import pytest_asyncio

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from googleapis_rest.config import reset_settings  # noqa: E402

_ENV_VARS = (
    "GOOGLE_APPLICATION_CREDENTIALS",
    "GOOGLEAPIS_ACCESS_TOKEN",
    "GOOGLE_OAUTH_ACCESS_TOKEN",
    "GOOGLEAPIS_SCOPES",
    "HTTP_TIMEOUT",
    "HTTP_MAX_ATTEMPTS",
    "HTTP_RETRY_DELAY",
    "HTTP_ENABLE_HTTP2",
    "LOG_LEVEL",
)


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line("markers", "auth: mark test as testing authentication")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from a known environment.

    Credentials and transport settings from the developer's shell are
    removed, retries do not sleep, and cached settings are dropped before
    and after the test.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HTTP_RETRY_DELAY", "0")
    reset_settings()
    yield
    reset_settings()


class MockHTTP:
    """Records requests and answers them from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest_asyncio.fixture
async def mock_http(monkeypatch):
    """Route the shared HTTP client through ``httpx.MockTransport``.

    Returns a function that installs a handler and gives back the
    :class:`MockHTTP` recorder. Each install shares one client, closed
    when the test finishes.
    """
    clients: List[httpx.AsyncClient] = []

    def install(handler=None, *, json=None, status_code=200) -> MockHTTP:
        if handler is None:

            def handler(request):
                return httpx.Response(status_code, json=json if json is not None else {})

        recorder = MockHTTP(handler)
        client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        clients.append(client)

        async def fake_get_http_client(**kwargs):
            return client

        monkeypatch.setattr(
            "googleapis_rest.utils.http.api_request.get_http_client",
            fake_get_http_client,
        )
        monkeypatch.setattr(
            "googleapis_rest.auth.providers.oauth.get_http_client",
            fake_get_http_client,
        )
        return recorder

    yield install

    for client in clients:
        await client.aclose()


# Rely on pytest-asyncio for async test handling; no custom hook needed.
