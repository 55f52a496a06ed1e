"""Write a Response to an ASGI ``send`` channel.

Rule URLs are opaque strings and may hold any Unicode. HTTP header
values are bytes, so ``Location`` is percent-encoded here: characters
outside ASCII become UTF-8 ``%XX`` escapes, while reserved characters
and existing escapes pass through untouched.
"""

from urllib.parse import quote

from urlshort._internal.asgi import Send
from urlshort.http.response import Response

# RFC 3986 reserved characters, plus "%" so existing escapes survive
_LOCATION_SAFE = ":/?#[]@!$&'()*+,;=%"

# No message body allowed (1xx is handled by range)
_BODILESS_STATUSES = frozenset({204, 304})


def encode_location(url: str) -> str:
    """Escape *url* for use as a ``Location`` header value.

    ``https://ja.wikipedia.org/wiki/東京`` becomes
    ``https://ja.wikipedia.org/wiki/%E6%9D%B1%E4%BA%AC``. ASCII URLs
    are returned unchanged apart from spaces and control characters.
    """
    return quote(url, safe=_LOCATION_SAFE)


def _raw_header(name: str, value: str) -> tuple[bytes, bytes]:
    lowered = name.lower()
    if lowered == "location":
        value = encode_location(value)
    return lowered.encode("latin-1"), value.encode("latin-1")


async def send_response(response: Response, send: Send) -> None:
    """Send *response* as ``http.response.start`` plus one body message."""
    status = response.status
    body = b"" if status < 200 or status in _BODILESS_STATUSES else response.body_bytes

    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers.extend(_raw_header(name, value) for name, value in response.headers)
    headers.append((b"content-length", b"%d" % len(body)))

    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body})
