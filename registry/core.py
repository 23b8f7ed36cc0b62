"""Registry of named tools.

Definitions are created once while the server starts and are never mutated
afterwards.  :meth:`ToolRegistry.invoke` validates raw arguments against the
tool's pydantic model before delegating to the handler.
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Mapping, Type

from pydantic import BaseModel, ValidationError

from .errors import InvalidInput, UnknownTool
from .results import ToolResult

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]


@dataclass(frozen=True)
class ToolDefinition:
    """A named tool with its input model and handler."""

    name: str
    input_model: Type[BaseModel]
    handler: Handler
    description: str = ""

    def input_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)


def _field_names(exc: ValidationError) -> List[str]:
    names = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        names.append(loc or "<root>")
    return names


class ToolRegistry:
    """Hold tool definitions and dispatch invocations."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        schema: Type[BaseModel],
        handler: Handler,
        description: str = "",
    ) -> ToolDefinition:
        """Store a new tool definition.

        Raises
        ------
        ValueError
            If a tool with the same name is already registered.
        """
        if name in self._tools:
            raise ValueError(f"tool already registered: {name}")
        definition = ToolDefinition(
            name=name, input_model=schema, handler=handler, description=description
        )
        self._tools[name] = definition
        logger.debug("Registered tool %s", name)
        return definition

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return list(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def invoke(self, name: str, raw_input: Mapping[str, Any] | None) -> ToolResult:
        """Validate ``raw_input`` and run the named tool."""
        definition = self._tools.get(name)
        if definition is None:
            logger.error("Unknown tool: %s", name)
            raise UnknownTool(name)
        try:
            params = definition.input_model.model_validate(dict(raw_input or {}))
        except ValidationError as exc:
            fields = _field_names(exc)
            logger.warning("Rejected input for %s: %s", name, ", ".join(fields))
            raise InvalidInput(name, fields) from exc
        logger.info("Invoking %s", name)
        result = definition.handler(params)
        if inspect.isawaitable(result):
            result = await result
        return result
