"""Pydantic input models for the exposed tools."""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    TypeAdapter,
    ValidationError,
)

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # validate only; the caller's spelling of the URL is kept as-is
    try:
        _url_adapter.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"invalid URL: {value!r}") from exc
    return value


Url = Annotated[str, AfterValidator(_check_url)]


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class AddInput(BaseModel):
    a: StrictFloat
    b: StrictFloat


class CalculateInput(BaseModel):
    operation: Operation
    a: StrictFloat
    b: StrictFloat


class NavigateInput(BaseModel):
    """Arguments for ``playwright_navigate``."""

    url: Url
    selector: Optional[str] = None
    action: Optional[str] = None
    text: Optional[str] = None
    screenshot: StrictBool = False


class ScrapeInput(BaseModel):
    """Arguments for ``playwright_scrape``."""

    model_config = ConfigDict(populate_by_name=True)

    url: Url
    selector: Optional[str] = None
    wait_for: Optional[str] = Field(default=None, alias="waitFor")
