"""Basic arithmetic and scientific calculator operations."""

from __future__ import annotations

import math
import operator as _op
from enum import Enum

PI = 3.14159265


class Operation(Enum):
    """Binary arithmetic operation, valued by its symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, a: float, b: float) -> float:
        """Apply the operation to two operands."""
        if self is Operation.DIVIDE and b == 0:
            raise ZeroDivisionError("division by zero")
        return _FUNCTIONS[self](a, b)


_FUNCTIONS = {
    Operation.ADD: _op.add,
    Operation.SUBTRACT: _op.sub,
    Operation.MULTIPLY: _op.mul,
    Operation.DIVIDE: _op.truediv,
}


def calculate(operator: Operation | str, a: float, b: float) -> float:
    """Apply the operator given by its symbol (or as an Operation) to ``a`` and ``b``."""
    try:
        operation = Operation(operator)
    except ValueError:
        raise ValueError(f"invalid operator: {operator!r}") from None
    return operation.apply(a, b)


def _radians(angle: float) -> float:
    return angle * PI / 180.0


def sine_degrees(angle: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(_radians(angle))


def cosine_degrees(angle: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(_radians(angle))


def tangent_degrees(angle: float) -> float:
    """Tangent of an angle given in degrees."""
    return math.tan(_radians(angle))


def natural_log(number: float) -> float:
    """Natural logarithm of a positive number."""
    if number <= 0:
        raise ValueError("invalid input for logarithm")
    return math.log(number)


def power(base: float, exponent: float) -> float:
    """``base`` raised to ``exponent``."""
    return math.pow(base, exponent)