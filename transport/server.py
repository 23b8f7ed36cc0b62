"""MCP protocol server bound to a :class:`~registry.ToolRegistry`."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from mcp import types
from mcp.server.lowlevel import Server

from config import Settings
from registry import ToolRegistry, to_mcp_content

logger = logging.getLogger(__name__)


def build_server(registry: ToolRegistry, settings: Settings) -> Server:
    """Create the protocol server exposing every registered tool.

    Registry errors (unknown tool, invalid input) propagate to the SDK, which
    reports them to the client as failed tool calls.
    """
    server: Server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=definition.name,
                description=definition.description,
                inputSchema=definition.input_schema(),
            )
            for definition in registry
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any] | None) -> List[types.TextContent]:
        result = await registry.invoke(name, arguments)
        return to_mcp_content(result)

    return server
