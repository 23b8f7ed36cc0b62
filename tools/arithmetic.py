"""Arithmetic tools: ``add`` and ``calculate``."""
from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any

from registry import ToolRegistry, ToolResult

from .models import AddInput, CalculateInput, Operation

logger = logging.getLogger(__name__)

DIVIDE_BY_ZERO = "Error: Cannot divide by zero"


def format_number(value: float) -> str:
    """Render ``value`` the way JavaScript's ``String(number)`` does.

    The shortest round-trip digits are laid out in plain decimal notation when
    the decimal point falls between 1e-7 and 1e21, otherwise in exponent form
    (``1e+21``, ``1e-7``).  Non-finite values are spelled ``Infinity``,
    ``-Infinity`` and ``NaN``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    # position of the decimal point relative to the first digit
    point = len(digit_tuple) + exponent
    count = len(digits)
    prefix = "-" if value < 0 else ""
    if count <= point <= 21:
        return prefix + digits + "0" * (point - count)
    if 0 < point <= 21:
        return prefix + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return prefix + "0." + "0" * -point + digits
    power = point - 1
    mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
    return f"{prefix}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def add(a: float, b: float) -> str:
    return format_number(a + b)


def calculate(operation: Operation, a: float, b: float) -> str:
    """Apply ``operation`` to ``a`` and ``b``.

    Division by zero is a domain result, not a failure: the literal
    :data:`DIVIDE_BY_ZERO` message is returned.
    """
    op = Operation(operation)
    if op is Operation.ADD:
        result = a + b
    elif op is Operation.SUBTRACT:
        result = a - b
    elif op is Operation.MULTIPLY:
        result = a * b
    else:
        if b == 0:
            logger.info("Division by zero requested for a=%s", a)
            return DIVIDE_BY_ZERO
        result = a / b
    return format_number(result)


def handle_add(params: AddInput) -> ToolResult:
    return ToolResult.text(add(params.a, params.b))


def handle_calculate(params: CalculateInput) -> ToolResult:
    return ToolResult.text(calculate(params.operation, params.a, params.b))


def register(registry: ToolRegistry, settings: Any = None) -> None:
    registry.register("add", AddInput, handle_add, description="Add two numbers.")
    registry.register(
        "calculate",
        CalculateInput,
        handle_calculate,
        description="Add, subtract, multiply or divide two numbers.",
    )
