"""
Built-in token conversion strategies.

Every converter implements ``ITokenConverter``: it never raises on bad input
and instead returns a failed ``ConversionResult`` describing the problem.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from argbind.core.domain.conversion_result import ConversionResult

T = TypeVar("T")

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
FLOAT_SPECIAL_PATTERN = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


class IntegerConverter:
    """Base-10 integers with an optional sign.

    Python integers are unbounded, so range checks only apply when bounds are
    given explicitly. Text longer than the interpreter's integer string
    limit is reported as out of range.
    """

    def __init__(self, min_value: int | None = None, max_value: int | None = None) -> None:
        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValueError("min_value must not exceed max_value.")
        self.min_value = min_value
        self.max_value = max_value

    def convert(self, text: str) -> ConversionResult[int]:
        if not INTEGER_PATTERN.fullmatch(text):
            return ConversionResult.failure(f"`{text}` is not an integer")

        try:
            value = int(text)
        except ValueError:
            # more digits than the interpreter will convert
            return ConversionResult.failure(f"`{text}` is out of range")
        if self.min_value is not None and value < self.min_value:
            return ConversionResult.failure(
                f"`{text}` is out of range (minimum is {self.min_value})"
            )
        if self.max_value is not None and value > self.max_value:
            return ConversionResult.failure(
                f"`{text}` is out of range (maximum is {self.max_value})"
            )
        return ConversionResult.success(value)


class FloatConverter:
    """Decimal and exponential floating point literals, plus inf and nan."""

    def convert(self, text: str) -> ConversionResult[float]:
        if FLOAT_SPECIAL_PATTERN.fullmatch(text):
            return ConversionResult.success(float(text))

        if not FLOAT_PATTERN.fullmatch(text):
            return ConversionResult.failure(f"`{text}` is not a floating point number")

        value = float(text)
        if math.isinf(value):
            return ConversionResult.failure(f"`{text}` is out of range")
        return ConversionResult.success(value)


class TextConverter:
    """Identity conversion. Always succeeds."""

    def convert(self, text: str) -> ConversionResult[str]:
        return ConversionResult.success(text)


class CallableConverter(Generic[T]):
    """Adapts a plain callable such as a type constructor.

    ``ValueError`` and ``TypeError`` raised by the callable are turned into a
    failed result; anything else propagates.
    """

    def __init__(self, func: Callable[[str], T], type_name: str | None = None) -> None:
        if not callable(func):
            raise TypeError("Converter function must be a callable.")
        self.func = func
        self.type_name = type_name or getattr(func, "__name__", repr(func))

    def convert(self, text: str) -> ConversionResult[T]:
        try:
            value = self.func(text)
        except (ValueError, TypeError) as e:
            return ConversionResult.failure(
                f"`{text}` is not a valid {self.type_name}: {e}"
            )
        return ConversionResult.success(value)


def as_converter(candidate: Any) -> Any:
    """Return ``candidate`` if it already converts, else wrap it."""
    if not isinstance(candidate, type) and callable(getattr(candidate, "convert", None)):
        return candidate
    return CallableConverter(candidate)
