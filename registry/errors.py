"""Exceptions raised while resolving and running tools."""
from __future__ import annotations

from typing import Iterable


class ToolError(Exception):
    """Base class for tool related failures."""


class UnknownTool(ToolError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidInput(ToolError):
    """Raised when tool arguments do not match the declared schema.

    ``fields`` lists the offending parameters using dotted locations.
    """

    def __init__(self, tool: str, fields: Iterable[str], details: str = "") -> None:
        self.tool = tool
        self.fields = sorted(set(fields))
        message = f"Invalid input for {tool}: {', '.join(self.fields)}"
        if details:
            message = f"{message} ({details})"
        super().__init__(message)


class UnsupportedAction(ToolError):
    def __init__(self, action: str, supported: Iterable[str]) -> None:
        self.action = action
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported action: {action} (expected one of {', '.join(self.supported)})"
        )


class ToolTimeout(ToolError):
    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Timed out after {seconds:g} seconds")
