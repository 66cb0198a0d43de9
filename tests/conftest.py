"""
Pytest configuration and common fixtures for wacloud tests.

Provides an in-process stand-in for aiohttp.ClientSession so client, handler
and messenger tests never touch the network.
"""

import json
from typing import Any

import pytest

from wacloud.core.logging.context import clear_phone_context
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient

TEST_TOKEN = "test_token"
TEST_PHONE_ID = "1234567890"
TEST_BASE_URL = "https://graph.facebook.com/"
TEST_API_VERSION = "v21.0"
API_URL = f"https://graph.facebook.com/{TEST_API_VERSION}"


class FakeResponse:
    """Minimal aiohttp.ClientResponse replacement."""

    def __init__(
        self,
        status: int = 200,
        body: Any = "",
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ):
        self.status = status
        self._text = body if isinstance(body, str) else json.dumps(body)
        self.headers = headers or {}
        self._content = content
        self.released = False

    async def text(self) -> str:
        return self._text

    async def read(self) -> bytes:
        if self._content is not None:
            return self._content
        return self._text.encode()

    def release(self) -> None:
        self.released = True


class _RequestContext:
    """Awaitable and async context manager, like aiohttp's request context."""

    def __init__(self, response: FakeResponse):
        self._response = response

    def __await__(self):
        return self._resolve().__await__()

    async def _resolve(self) -> FakeResponse:
        return self._response

    async def __aenter__(self) -> FakeResponse:
        return self._response

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        self._response.release()
        return False


class FakeSession:
    """Records requests and answers them from a queue of responses."""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self._responses: list[FakeResponse | Exception] = []

    def queue(self, response: FakeResponse | Exception) -> FakeResponse | Exception:
        self._responses.append(response)
        return response

    def request(self, method: str, url: str, **kwargs) -> _RequestContext:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return _RequestContext(response)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(fake_session: FakeSession) -> WhatsAppClient:
    """WhatsApp client wired to the fake session."""
    return WhatsAppClient(
        session=fake_session,
        access_token=TEST_TOKEN,
        phone_number_id=TEST_PHONE_ID,
        api_version=TEST_API_VERSION,
        base_url=TEST_BASE_URL,
        log_bodies=False,
    )


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up test environment variables and a clean logging context."""
    monkeypatch.setenv("ENVIRONMENT", "DEV")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("WP_PHONE_ID", TEST_PHONE_ID)
    monkeypatch.setenv("WP_ACCESS_TOKEN", TEST_TOKEN)
    clear_phone_context()
    yield
    clear_phone_context()
