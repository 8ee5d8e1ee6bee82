"""
Shared fixtures: a fake Clockify API served through httpx.MockTransport.
"""

from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.api.service import ClockifyService
from clockify_mcp_server.config import ClockifyConfig
from clockify_mcp_server.server import create_mcp_server

BASE_URL = "https://api.clockify.me/api/v1"
API_PREFIX = "/api/v1"


class FakeClockify:
    """
    Minimal stand-in for the Clockify API.

    Routes are keyed by (method, path) where path is relative to the API base
    URL and excludes the query string. Every request is recorded.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status: int = 200,
        text: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.routes[(method, path)] = {"json": json, "status": status, "text": text, "headers": headers}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(API_PREFIX):]
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, text=f"No route for {request.method} {path}")

        if route["text"] is not None:
            return httpx.Response(route["status"], text=route["text"], headers=route["headers"])
        return httpx.Response(route["status"], json=route["json"], headers=route["headers"])

    @property
    def calls(self) -> List[Tuple[str, str]]:
        """(method, path-with-query) of every request, relative to the API base URL."""
        return [
            (request.method, request.url.raw_path.decode()[len(API_PREFIX):])
            for request in self.requests
        ]


@pytest.fixture
def config() -> ClockifyConfig:
    return ClockifyConfig(api_key="test-api-key", base_url=BASE_URL)


@pytest.fixture
def upstream() -> FakeClockify:
    return FakeClockify()


@pytest.fixture
def transport(upstream) -> httpx.MockTransport:
    return httpx.MockTransport(upstream.handler)


@pytest.fixture
def api_client(config, transport) -> ClockifyApiClient:
    return ClockifyApiClient(config, transport=transport)


@pytest.fixture
def service(api_client) -> ClockifyService:
    return ClockifyService(api_client)


@pytest.fixture
def mcp(config, transport):
    return create_mcp_server(config, transport=transport)


@pytest.fixture
def current_user() -> Dict[str, Any]:
    return {
        "id": "u1",
        "name": "Ann",
        "email": "a@x.com",
        "activeWorkspace": "w1",
        "defaultWorkspace": "w1",
        "memberships": [],
        "settings": {"weekStart": "MONDAY"},
    }
