"""MCP server binding, transports and request routing."""

from .handlers import SseTransport, StreamableHttpTransport
from .router import TransportRouter, resolve_transport
from .server import build_server

__all__ = [
    "SseTransport",
    "StreamableHttpTransport",
    "TransportRouter",
    "build_server",
    "resolve_transport",
]
