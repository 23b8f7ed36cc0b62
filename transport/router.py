"""Path based dispatch to the transport handlers."""
from __future__ import annotations

import logging
from typing import Optional

from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from .handlers import RPC_PATH, SSE_MESSAGE_PATH, SSE_PATH

logger = logging.getLogger(__name__)

SSE = "sse"
STREAMABLE_HTTP = "streamable_http"

_ROUTES = {
    SSE_PATH: SSE,
    SSE_MESSAGE_PATH: SSE,
    RPC_PATH: STREAMABLE_HTTP,
}


def resolve_transport(path: str) -> Optional[str]:
    """Return the transport name serving ``path`` or ``None``."""
    return _ROUTES.get(path)


class TransportRouter:
    """ASGI app choosing a transport from the request path alone."""

    def __init__(self, sse: ASGIApp, streamable_http: ASGIApp) -> None:
        self.handlers = {SSE: sse, STREAMABLE_HTTP: streamable_http}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        transport = resolve_transport(scope.get("path", ""))
        if scope["type"] == "websocket":
            await send({"type": "websocket.close", "code": 1008})
            return
        if transport is None:
            logger.debug("No transport for %s", scope.get("path"))
            response = PlainTextResponse("Not found", status_code=404)
            await response(scope, receive, send)
            return
        await self.handlers[transport](scope, receive, send)
