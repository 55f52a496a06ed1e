"""Normalize sync and async handlers to one async calling convention.

Fallbacks may be plain functions, coroutine functions, or objects with
an ``async def __call__``. Wrapping happens once, when a handler is
built, so the request path never re-inspects the callable.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any


def _is_async(handler: Any) -> bool:
    if inspect.iscoroutinefunction(handler):
        return True
    call = getattr(handler, "__call__", None)  # noqa: B004
    return inspect.iscoroutinefunction(call)


def ensure_async(handler: Callable[[Any], Any]) -> Callable[[Any], Awaitable[Any]]:
    """Return *handler* itself if it is async, otherwise an async wrapper.

    The wrapper still awaits the result when a sync callable happens to
    return an awaitable (e.g. a ``functools.partial`` over a coroutine
    function).
    """
    if _is_async(handler):
        return handler

    async def call(request: Any) -> Any:
        response = handler(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    return call
