"""Tests for urlshort._internal.asyncify: one calling convention for handlers."""

import functools

from urlshort._internal.asyncify import ensure_async
from urlshort.http.request import Request
from urlshort.http.response import Response


async def async_handler(request: Request) -> Response:
    return Response(f"async {request.path}")


def sync_handler(request: Request) -> Response:
    return Response(f"sync {request.path}")


class CallableHandler:
    async def __call__(self, request: Request) -> Response:
        return Response(f"object {request.path}")


class TestEnsureAsync:
    def test_coroutine_function_returned_as_is(self) -> None:
        assert ensure_async(async_handler) is async_handler

    def test_async_callable_object_returned_as_is(self) -> None:
        handler = CallableHandler()
        assert ensure_async(handler) is handler

    async def test_sync_function_wrapped(self) -> None:
        wrapped = ensure_async(sync_handler)

        assert wrapped is not sync_handler
        assert (await wrapped(Request("GET", "/a"))).text == "sync /a"

    async def test_sync_callable_returning_awaitable(self) -> None:
        def returns_coroutine(request: Request):
            return async_handler(request)

        wrapped = ensure_async(returns_coroutine)

        assert (await wrapped(Request("GET", "/b"))).text == "async /b"

    async def test_partial_over_sync_function(self) -> None:
        def tagged(tag: str, request: Request) -> Response:
            return Response(f"{tag} {request.path}")

        wrapped = ensure_async(functools.partial(tagged, "partial"))

        assert (await wrapped(Request("GET", "/c"))).text == "partial /c"
