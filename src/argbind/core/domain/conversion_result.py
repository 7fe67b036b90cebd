"""
Conversion Result Domain Model

Outcome of converting a single token: either a value of the target type or
the reason the token was rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """Result of a token conversion."""

    ok: bool
    value: T | None = None
    reason: str = ""

    @classmethod
    def success(cls, value: T) -> ConversionResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> ConversionResult[Any]:
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok
