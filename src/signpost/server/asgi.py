"""ASGI boundary — serves a Router as an ASGI 3 application.

The only component that touches raw ASGI. Reads method, path, query,
headers and body from the scope, runs ``Router.dispatch`` in a worker
thread, and turns the handler's return value (or ``NotFound``) into an
HTTP response.
"""

import json as json_module
import logging
from functools import partial
from typing import Any

import anyio.to_thread

from signpost._internal.asgi import HTTPScope, Receive, Scope, Send
from signpost.errors import HTTPError
from signpost.routing.router import Router

logger = logging.getLogger("signpost.server")


def render_result(result: Any) -> tuple[bytes, str]:
    """Encode a handler return value as ``(body, content_type)``."""
    if result is None:
        return b"", "text/plain; charset=utf-8"
    if isinstance(result, bytes):
        return result, "application/octet-stream"
    if isinstance(result, (dict, list)):
        return json_module.dumps(result).encode("utf-8"), "application/json"
    return str(result).encode("utf-8"), "text/plain; charset=utf-8"


async def read_body(receive: Receive) -> bytes:
    """Read the full request body from ASGI ``http.request`` messages."""
    chunks: list[bytes] = []
    while True:
        message = await receive()
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


async def send_response(send: Send, status: int, body: bytes, content_type: str) -> None:
    """Translate a status/body pair into ASGI send() calls."""
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [
                (b"content-type", content_type.encode("latin-1")),
                (b"content-length", str(len(body)).encode("latin-1")),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


class RouterApp:
    """ASGI application wrapping a :class:`Router`.

    Usage::

        router = Router().get("/users/{name?}", show_user)
        app = RouterApp(router)   # hand to any ASGI server

    The router is frozen on construction, so worker threads only ever
    see its immutable route table.
    """

    __slots__ = ("router",)

    def __init__(self, router: Router) -> None:
        router.freeze()
        self.router = router

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        http = HTTPScope.from_scope(scope)
        body = await read_body(receive)
        dispatch = partial(
            self.router.dispatch,
            http.method,
            http.path,
            query=http.query_string,
            headers=http.headers,
            body=body or None,
        )

        try:
            result = await anyio.to_thread.run_sync(dispatch)
        except HTTPError as exc:
            logger.debug("%d %s %s — %s", exc.status, http.method, http.path, exc.detail)
            payload, content_type = render_result(exc.detail)
            await send_response(send, exc.status, payload, content_type)
            return
        except Exception:
            logger.exception("500 %s %s", http.method, http.path)
            raise

        payload, content_type = render_result(result)
        await send_response(send, 200, payload, content_type)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan startup/shutdown; the router needs no setup."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
