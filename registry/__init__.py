"""Tool registry, result envelope and error types."""

from .core import ToolDefinition, ToolRegistry
from .errors import InvalidInput, ToolError, ToolTimeout, UnknownTool, UnsupportedAction
from .results import ToolResult, normalize_error, reports_errors, to_mcp_content

__all__ = [
    "ToolDefinition",
    "ToolRegistry",
    "ToolResult",
    "ToolError",
    "InvalidInput",
    "UnknownTool",
    "UnsupportedAction",
    "ToolTimeout",
    "normalize_error",
    "reports_errors",
    "to_mcp_content",
]
