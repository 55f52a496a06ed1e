"""Redirect dispatch.

A handler is any callable matching::

    async def handler(request: Request) -> Response: ...

Plain ``def`` handlers are accepted wherever a fallback is expected.
:func:`map_handler` and :func:`yaml_handler` always return an ``async``
handler, so the result can be mounted with :class:`~urlshort.server.asgi.ASGIApp`
or passed as the fallback of another redirect handler::

    rules = {"/docs": "https://example.com/docs"}
    handler = map_handler(rules, fallback=not_found)
    handler = yaml_handler(Path("redirects.yaml").read_bytes(), fallback=handler)
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import TypeAlias

from urlshort._internal.asyncify import ensure_async
from urlshort.errors import ConfigurationError
from urlshort.http.request import Request
from urlshort.http.response import REDIRECT_STATUSES, Redirect, Response
from urlshort.rules import RuleTable, parse_rules

# A request handler, sync or async
Handler: TypeAlias = Callable[[Request], Response | Awaitable[Response]]

# The async handler the dispatcher hands back, and the ``next`` it calls
Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class RedirectMiddleware:
    """Redirect requests whose path has a rule; pass the rest to ``next``.

    Lookup is a single dict probe on ``request.path``. The query string
    is not part of the path and casing or trailing slashes are never
    normalized. A hit returns a redirect without calling ``next``; a
    miss returns whatever ``next`` returns, untouched.

    Usage::

        redirects = RedirectMiddleware({"/gh": "https://github.com"})
        response = await redirects(request, fallback)
    """

    __slots__ = ("_status", "_table")

    def __init__(self, rules: Mapping[str, str], *, status: int = 302) -> None:
        if status not in REDIRECT_STATUSES:
            allowed = ", ".join(str(s) for s in sorted(REDIRECT_STATUSES))
            msg = f"Redirect status must be one of {allowed}, got {status}"
            raise ConfigurationError(msg)
        self._table = RuleTable.from_mapping(rules)
        self._status = status

    @property
    def table(self) -> RuleTable:
        return self._table

    async def __call__(self, request: Request, next: Handler) -> Response:
        url = self._table.get(request.path)
        if url is not None:
            return Redirect(url, status=self._status).to_response()
        return await ensure_async(next)(request)


def map_handler(
    rules: Mapping[str, str],
    fallback: Handler,
    *,
    status: int = 302,
) -> Next:
    """Build a handler redirecting each path in *rules* to its URL.

    *rules* is copied, so later changes to the caller's mapping have no
    effect on the handler. Requests for any other path go to *fallback*.

    Raises:
        ConfigurationError: If *status* is not a redirect status.
    """
    redirects = RedirectMiddleware(rules, status=status)
    fallback = ensure_async(fallback)

    async def handler(request: Request) -> Response:
        return await redirects(request, fallback)

    return handler


def yaml_handler(
    yml: bytes | str,
    fallback: Handler,
    *,
    strict: bool = True,
    status: int = 302,
) -> Next:
    """Parse a YAML rule document and build a handler from it.

    See :func:`urlshort.rules.parse_rules` for the document format.

    Raises:
        RuleParseError: If *yml* is not a valid rule document. No handler
            is built in that case.
    """
    return map_handler(parse_rules(yml, strict=strict), fallback, status=status)


async def not_found(request: Request) -> Response:  # noqa: ARG001
    """Fallback that answers every request with a plain 404."""
    return Response(body="404 page not found\n", status=404)
