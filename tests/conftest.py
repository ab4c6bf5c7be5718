"""
Test configuration and fixtures for the TinyLink client.
This centralizes all test setup, making individual tests clean.
"""

import asyncio
import json
from datetime import datetime, timezone

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from tinylink_app.clipboard.strategies import ClipboardStrategy
from tinylink_app.dependencies import get_client_context
from tinylink_app.link_api.factory import LinkAPIFactory
from tinylink_app.link_api.strategies import HttpLinkAPI, InMemoryLinkAPI
from tinylink_app.schemas.link import LinkRecord
from tinylink_app.services.context import ClientContext

API_BASE_URL = "http://x"


def link_json(code: str, link_id: int = 1, clicks: int = 0, last_clicked_at=None) -> dict:
    """A LinkRecord as the server sends it"""
    return {
        "id": link_id,
        "code": code,
        "short_url": f"{API_BASE_URL}/{code}",
        "original_url": f"https://example.com/{code}",
        "clicks": clicks,
        "last_clicked_at": last_clicked_at,
    }


class FakeLinkServer:
    """
    Scriptable link API behind httpx.MockTransport.

    Every request is recorded so tests can count calls (a GET is one
    directory refresh) and inspect payloads.
    """

    def __init__(self):
        self.links = []
        self.list_status = 200
        self.list_content = None  # raw body override for GET
        self.create_status = 201
        self.create_body = {"short_url": f"{API_BASE_URL}/abc123"}
        self.create_content = None  # raw body override for POST
        self.delete_status = 204
        self.error = None  # exception raised for every request
        self.gate = None  # asyncio.Event holding POSTs until set
        self.requests = []

    def count(self, method: str) -> int:
        return sum(1 for request in self.requests if request.method == method)

    def payloads(self) -> list:
        return [json.loads(r.content) for r in self.requests if r.method == "POST"]

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST" and self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error

        if request.method == "GET":
            if self.list_content is not None:
                return httpx.Response(self.list_status, content=self.list_content)
            return httpx.Response(self.list_status, json=self.links)
        if request.method == "POST":
            if self.create_content is not None:
                return httpx.Response(self.create_status, content=self.create_content)
            return httpx.Response(self.create_status, json=self.create_body)
        if request.method == "DELETE":
            return httpx.Response(self.delete_status)
        return httpx.Response(405)


class InMemoryClipboard(ClipboardStrategy):
    """Clipboard held in a variable, for asserting what was copied"""

    def __init__(self):
        self.contents = None

    async def write(self, text: str) -> None:
        self.contents = text


class ClickingLinkAPI(InMemoryLinkAPI):
    """In-memory API that can also count a visit, as the server does on redirect"""

    def record_click(self, code: str) -> LinkRecord:
        record = self._links[code]
        updated = record.model_copy(update={
            "clicks": record.clicks + 1,
            "last_clicked_at": datetime.now(timezone.utc),
        })
        self._links[code] = updated
        return updated


@pytest.fixture(autouse=True)
def reset_factories():
    """Each test starts without a cached API singleton or client context"""
    LinkAPIFactory.clear_instance()
    get_client_context.cache_clear()
    yield
    asyncio.run(LinkAPIFactory.close_instance())
    get_client_context.cache_clear()


@pytest.fixture(scope="function")
def fake_server():
    return FakeLinkServer()


@pytest.fixture(scope="function")
def http_api(fake_server):
    """HttpLinkAPI wired to the fake server instead of the network"""
    return HttpLinkAPI(API_BASE_URL, transport=httpx.MockTransport(fake_server.handle))


@pytest.fixture(scope="function")
def clipboard():
    return InMemoryClipboard()


@pytest.fixture(scope="function")
def http_context(http_api, clipboard):
    """Client context talking HTTP to the fake server"""
    return ClientContext(api=http_api, api_base_url=API_BASE_URL, clipboard=clipboard)


@pytest.fixture(scope="function")
def memory_api():
    return ClickingLinkAPI(API_BASE_URL)


@pytest.fixture(scope="function")
def memory_context(memory_api, clipboard):
    """Client context backed by the in-memory link API"""
    return ClientContext(api=memory_api, api_base_url=API_BASE_URL, clipboard=clipboard)


@pytest.fixture(scope="function")
def client(memory_context):
    """
    Create a test client with the client context overridden.
    This is the main fixture that page tests will use.
    """
    app.dependency_overrides[get_client_context] = lambda: memory_context

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_link():
    """Factory for server-shaped link JSON"""
    return link_json
