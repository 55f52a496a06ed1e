"""ASGI adapter: mounts a handler on any ASGI 3 server.

The only component that touches raw ASGI directly. Converts the scope
into a Request, awaits the handler, and sends the Response back::

    app = ASGIApp(yaml_handler(Path("redirects.yaml").read_bytes(), not_found))

    # uvicorn module:app, hypercorn module:app, ...
"""

import logging

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort._internal.asyncify import ensure_async
from urlshort.handler import Handler
from urlshort.http.request import Request
from urlshort.server.sender import send_response

logger = logging.getLogger("urlshort.server")


class ASGIApp:
    """ASGI application wrapping a single request handler.

    Only ``http`` scopes are dispatched; ``lifespan`` and ``websocket``
    scopes are ignored. Exceptions raised by the handler propagate to the
    server, which owns error reporting for the request.
    """

    __slots__ = ("_call", "handler")

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self._call = ensure_async(handler)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            logger.debug("Ignoring %s scope", scope["type"])
            return

        request = Request.from_asgi(scope, receive)
        response = await self._call(request)
        await send_response(response, send)
