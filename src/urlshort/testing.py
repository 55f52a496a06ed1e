"""Test helpers for urlshort handlers.

Requests go through :class:`~urlshort.server.asgi.ASGIApp`, so a test
sees exactly the status, headers and (encoded) ``Location`` a real
server would send.
"""

from __future__ import annotations

from typing import Any

from urlshort.handler import Handler
from urlshort.http.response import Response
from urlshort.server.asgi import ASGIApp


def assert_redirects(response: Response, url: str, *, status: int = 302) -> None:
    """Assert *response* is a redirect to exactly *url*.

    Uses plain ``assert`` like pytest helpers do, so it checks nothing
    when Python runs with ``-O``. Meant for test suites only.
    """
    assert response.status == status, f"Expected status {status}, got {response.status}"
    assert response.location == url, f"Expected Location {url!r}, got {response.location!r}"


def _http_scope(method: str, target: str, headers: dict[str, str] | None) -> dict[str, Any]:
    path, _, query = target.partition("?")
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method.upper(),
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": query.encode("latin-1"),
        "headers": raw_headers,
        "client": ("127.0.0.1", 0),
    }


def _response_from(messages: list[dict[str, Any]]) -> Response:
    start = next(m for m in messages if m["type"] == "http.response.start")
    content_type = "text/plain; charset=utf-8"
    headers: list[tuple[str, str]] = []
    for raw_name, raw_value in start["headers"]:
        name, value = raw_name.decode("latin-1"), raw_value.decode("latin-1")
        if name == "content-type":
            content_type = value
        elif name != "content-length":
            headers.append((name, value))
    body = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")
    return Response(
        body=body, status=start["status"], content_type=content_type, headers=tuple(headers)
    )


class TestClient:
    """Drive a handler or ASGI app in-process.

    A bare handler is wrapped in :class:`ASGIApp` for you::

        async with TestClient(map_handler(rules, not_found)) as client:
            assert await client.resolve("/docs") == "https://example.com/docs"
            response = await client.get("/elsewhere")
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("app",)

    def __init__(self, app: ASGIApp | Handler) -> None:
        self.app = app if isinstance(app, ASGIApp) else ASGIApp(app)

    async def __aenter__(self) -> TestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def resolve(self, path: str) -> str | None:
        """``Location`` sent for a GET of *path*, or ``None`` if not redirected."""
        response = await self.get(path)
        return response.location if 300 <= response.status < 400 else None

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes = b"",
    ) -> Response:
        return await self.request("POST", path, headers=headers, body=body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes = b"",
    ) -> Response:
        """Send one request through the app and collect what it sends back."""
        inbound = [{"type": "http.request", "body": body, "more_body": False}]
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return inbound.pop(0) if inbound else {"type": "http.disconnect"}

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await self.app(_http_scope(method, path, headers), receive, send)
        return _response_from(sent)
