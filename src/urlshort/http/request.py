"""Immutable HTTP request.

Only what redirect dispatch and ordinary fallbacks need: method, path,
query string, and headers. Created once per request by the ASGI adapter
and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from urlshort._internal.asgi import Receive, Scope
from urlshort.http.headers import Headers


async def _no_body() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the decoded path component exactly as the server
    delivered it; redirect rules match against it verbatim. The query
    string is kept separately in ``query_string`` and never takes part
    in matching.
    """

    method: str
    path: str
    query_string: bytes = b""
    headers: Headers = field(default_factory=Headers)
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    # ASGI receive callable, for fallbacks that read the body
    _receive: Receive = field(default=_no_body, repr=False, compare=False)

    @property
    def url(self) -> str:
        """Path plus query string, as the client requested it."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    async def body(self) -> bytes:
        """Read the full request body from the ASGI channel."""
        chunks: list[bytes] = []
        while True:
            message = await self._receive()
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                break
        return b"".join(chunks)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Create a Request from an ASGI HTTP scope and receive callable."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
            headers=Headers(tuple(scope.get("headers", ()))),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
        )
