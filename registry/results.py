"""Result envelope shared by every tool.

Execution failures are reported as successful results carrying an
``Error: `` prefixed text.  :func:`reports_errors` is the only place where that
conversion happens.
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Tuple

from mcp import types

from .errors import ToolError

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class TextContent:
    text: str
    kind: str = "text"


@dataclass(frozen=True)
class ToolResult:
    """Ordered, non-empty sequence of content items."""

    content: Tuple[TextContent, ...]

    def __post_init__(self) -> None:
        if not self.content:
            raise ValueError("tool result content must not be empty")

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text=text),))

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls.text(f"{ERROR_PREFIX}{message}")

    @property
    def text_value(self) -> str:
        return "".join(item.text for item in self.content if item.kind == "text")

    @property
    def is_error(self) -> bool:
        return self.text_value.startswith(ERROR_PREFIX)


def normalize_error(exc: BaseException) -> ToolResult:
    """Convert ``exc`` into an error-shaped :class:`ToolResult`."""
    message = str(exc) or type(exc).__name__
    return ToolResult.error(message)


def reports_errors(
    func: Callable[..., Awaitable[ToolResult]],
) -> Callable[..., Awaitable[ToolResult]]:
    """Wrap an async tool handler so failures become error results."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> ToolResult:
        try:
            return await func(*args, **kwargs)
        except ToolError as exc:
            logger.warning("Tool handler %s rejected: %s", func.__name__, exc)
            return normalize_error(exc)
        except Exception as exc:
            logger.exception("Tool handler %s failed: %s", func.__name__, exc)
            return normalize_error(exc)

    return wrapper


def to_mcp_content(result: ToolResult) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=item.text) for item in result.content]
