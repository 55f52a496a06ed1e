"""Responses produced by redirect handlers and their fallbacks.

A ``Response`` is frozen; ``with_status`` and ``with_header`` return
modified copies. A ``Redirect`` is the value a matched rule turns into.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# Statuses a redirect may be issued with
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response: status, headers, and an optional body.

    Header values are kept as given. Wire encoding (including the
    ``Location`` escaping) happens in :mod:`urlshort.server.sender`.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name*, compared case-insensitively."""
        wanted = name.lower()
        return next((value for key, value in self.headers if key.lower() == wanted), default)

    @property
    def location(self) -> str | None:
        """Redirect target, or ``None`` if this is not a redirect."""
        return self.header("Location")

    @property
    def body_bytes(self) -> bytes:
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to ``url``. ``url`` is kept exactly as the rule gave it."""

    url: str
    status: int = 302
    headers: tuple[tuple[str, str], ...] = ()

    def to_response(self) -> Response:
        """An empty-bodied Response with ``Location`` first, then extra headers."""
        return Response(status=self.status, headers=(("Location", self.url), *self.headers))
