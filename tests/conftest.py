"""Shared fixtures: settings and a stubbed Fulcrum API behind httpx.MockTransport."""
import json
from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from fulcrum_mcp.client import FulcrumClient
from fulcrum_mcp.config import Settings
from fulcrum_mcp.dispatcher import ToolDispatcher

BASE_URL = "https://fulcrum.test"


class FulcrumStub:
    """Answers requests from a ``(method, path) -> (status, payload)`` table and records them."""

    def __init__(self, routes: Dict[Tuple[str, str], Tuple[int, Any]]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.raw_path.decode())
        if key not in self.routes:
            return httpx.Response(404, text="no such route")
        status, payload = self.routes[key]
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def settings() -> Settings:
    return Settings(api_token="test-token", base_url=BASE_URL)


@pytest.fixture
def make_client(settings) -> Callable[..., Tuple[FulcrumClient, FulcrumStub]]:
    def _make(routes: Dict[Tuple[str, str], Tuple[int, Any]]):
        stub = FulcrumStub(routes)
        return FulcrumClient(settings, transport=httpx.MockTransport(stub)), stub
    return _make


@pytest.fixture
def make_dispatcher(make_client) -> Callable[..., Tuple[ToolDispatcher, FulcrumStub]]:
    def _make(routes: Dict[Tuple[str, str], Tuple[int, Any]]):
        client, stub = make_client(routes)
        return ToolDispatcher(client), stub
    return _make
