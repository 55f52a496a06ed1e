"""Tests for urlshort.http.request and urlshort.http.headers."""

import pytest

from urlshort.http.headers import Headers
from urlshort.http.request import Request


def _scope(**overrides):
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "method": "GET",
        "path": "/a",
        "query_string": b"",
        "headers": [],
    }
    scope.update(overrides)
    return scope


async def _receive_nothing():
    return {"type": "http.request", "body": b"", "more_body": False}


class TestHeaders:
    def test_case_insensitive(self) -> None:
        h = Headers(((b"Content-Type", b"text/plain"),))
        assert h["content-type"] == "text/plain"
        assert h["CONTENT-TYPE"] == "text/plain"
        assert "Content-Type" in h

    def test_first_value_and_get_list(self) -> None:
        h = Headers(((b"accept", b"a"), (b"Accept", b"b")))
        assert h["accept"] == "a"
        assert h.get_list("accept") == ["a", "b"]
        assert len(h) == 1

    def test_missing(self) -> None:
        h = Headers()
        assert h.get("x-missing") is None
        assert h.get_list("x-missing") == []
        with pytest.raises(KeyError):
            h["x-missing"]

    def test_raw_preserved(self) -> None:
        raw = ((b"Host", b"example.com"),)
        assert Headers(raw).raw == raw


class TestRequestFromAsgi:
    def test_basic_fields(self) -> None:
        scope = _scope(
            method="POST",
            path="/submit",
            query_string=b"x=1",
            headers=[(b"host", b"example.com")],
            http_version="2",
            client=["10.0.0.1", 5000],
        )
        r = Request.from_asgi(scope, _receive_nothing)
        assert r.method == "POST"
        assert r.path == "/submit"
        assert r.query_string == b"x=1"
        assert r.headers["Host"] == "example.com"
        assert r.http_version == "2"
        assert r.client == ("10.0.0.1", 5000)

    def test_defaults(self) -> None:
        r = Request.from_asgi({"type": "http", "method": "GET", "path": "/"}, _receive_nothing)
        assert r.query_string == b""
        assert len(r.headers) == 0
        assert r.http_version == "1.1"
        assert r.client is None

    def test_url(self) -> None:
        assert Request("GET", "/a").url == "/a"
        assert Request("GET", "/a", query_string=b"q=1").url == "/a?q=1"

    def test_frozen(self) -> None:
        r = Request("GET", "/a")
        with pytest.raises(AttributeError):
            r.path = "/b"  # type: ignore[misc]


class TestRequestBody:
    async def test_reads_chunks(self) -> None:
        messages = iter(
            [
                {"type": "http.request", "body": b"hello ", "more_body": True},
                {"type": "http.request", "body": b"world", "more_body": False},
            ]
        )

        async def receive():
            return next(messages)

        r = Request.from_asgi(_scope(method="POST"), receive)
        assert await r.body() == b"hello world"

    async def test_default_body_is_empty(self) -> None:
        assert await Request("GET", "/").body() == b""
