"""ASGI handlers for the two MCP transports."""
from __future__ import annotations

import contextlib
import logging
from typing import AsyncIterator

from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

logger = logging.getLogger(__name__)

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message"
RPC_PATH = "/mcp"


class SseTransport:
    """Server-sent events transport.

    ``GET /sse`` opens the event stream; clients post JSON-RPC messages to
    ``/sse/message?session_id=...``.
    """

    def __init__(self, server: Server, message_path: str = SSE_MESSAGE_PATH) -> None:
        self.server = server
        self.message_path = message_path
        self.sse = SseServerTransport(message_path)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["path"] == self.message_path:
            await self.sse.handle_post_message(scope, receive, send)
            return
        logger.info("SSE client connected")
        async with self.sse.connect_sse(scope, receive, send) as (read_stream, write_stream):
            await self.server.run(
                read_stream, write_stream, self.server.create_initialization_options()
            )
        logger.info("SSE client disconnected")


class StreamableHttpTransport:
    """Request/response transport served from a single endpoint."""

    def __init__(self, server: Server, json_response: bool = False, stateless: bool = False) -> None:
        self.session_manager = StreamableHTTPSessionManager(
            app=server, json_response=json_response, stateless=stateless
        )

    @contextlib.asynccontextmanager
    async def run(self) -> AsyncIterator[None]:
        """Keep the session manager's task group alive for the app lifetime."""
        async with self.session_manager.run():
            yield

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)
