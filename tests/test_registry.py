import asyncio

import pytest
from pydantic import BaseModel

from registry import InvalidInput, ToolRegistry, ToolResult, UnknownTool
from tools import build_registry


class EchoInput(BaseModel):
    message: str
    times: int = 1


def echo(params: EchoInput) -> ToolResult:
    return ToolResult.text(params.message * params.times)


async def async_echo(params: EchoInput) -> ToolResult:
    await asyncio.sleep(0)
    return ToolResult.text(params.message.upper())


def test_register_and_invoke_sync_and_async_handlers():
    registry = ToolRegistry()
    registry.register("echo", EchoInput, echo, description="Repeat a message.")
    registry.register("shout", EchoInput, async_echo)

    assert registry.names() == ["echo", "shout"]
    assert "echo" in registry and len(registry) == 2
    assert asyncio.run(registry.invoke("echo", {"message": "ab", "times": 2})).text_value == "abab"
    assert asyncio.run(registry.invoke("shout", {"message": "hi"})).text_value == "HI"


def test_duplicate_registration_is_rejected():
    registry = ToolRegistry()
    registry.register("echo", EchoInput, echo)
    with pytest.raises(ValueError):
        registry.register("echo", EchoInput, async_echo)
    assert registry.get("echo").handler is echo


def test_invalid_input_names_offending_fields():
    registry = ToolRegistry()
    registry.register("echo", EchoInput, echo)
    with pytest.raises(InvalidInput) as info:
        asyncio.run(registry.invoke("echo", {"times": "many"}))
    assert info.value.fields == ["message", "times"]
    assert "message" in str(info.value)


def test_missing_arguments_are_treated_as_empty():
    registry = ToolRegistry()
    registry.register("echo", EchoInput, echo)
    with pytest.raises(InvalidInput) as info:
        asyncio.run(registry.invoke("echo", None))
    assert info.value.fields == ["message"]


def test_unknown_tool():
    with pytest.raises(UnknownTool):
        asyncio.run(ToolRegistry().invoke("nope", {}))


def test_default_registry_contents_and_schemas():
    registry = build_registry()
    assert registry.names() == ["add", "calculate", "playwright_navigate", "playwright_scrape"]

    calculate = registry.get("calculate").input_schema()
    assert set(calculate["required"]) == {"operation", "a", "b"}

    scrape = registry.get("playwright_scrape").input_schema()
    assert "waitFor" in scrape["properties"]
    assert scrape["required"] == ["url"]

    navigate = registry.get("playwright_navigate").input_schema()
    assert navigate["properties"]["screenshot"]["default"] is False
