from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from ticketflow_client.config import ClientConfig
from ticketflow_client.http_client import HttpClient

API_BASE = "http://api.test"

ALICE = {"id": "1", "email": "alice@example.com", "name": "Alice", "role": "user"}

EVENT = {
    "id": "evt-1",
    "name": "Spring Gala",
    "description": None,
    "imageUrl": None,
    "startDate": "2025-03-15T20:00:00Z",
    "endDate": "2025-03-15T23:00:00Z",
}

Handler = Callable[[httpx.Request], Any]


def make_http(handler: Handler) -> HttpClient:
    config = ClientConfig(env_name="test", api_base_url=API_BASE)
    return HttpClient(config=config, transport=httpx.MockTransport(handler))


def body_of(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None


class Recorder:
    """Routes requests by (method, path) and keeps every request it saw."""

    def __init__(self, routes: dict[tuple[str, str], Any]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]
