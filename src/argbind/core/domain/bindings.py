"""
Bindings between registered argument names and caller-owned storage cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from argbind.core.domain.conversion_result import ConversionResult
from argbind.core.interfaces.storage_cell_interface import IStorageCell
from argbind.core.interfaces.token_converter_interface import ITokenConverter


@dataclass(frozen=True)
class FlagBinding:
    """A zero-argument switch. Present means True, absent means ``default``."""

    name: str
    cell: IStorageCell = field(repr=False, compare=False)
    default: bool = False

    def reset(self) -> None:
        self.cell.set(self.default)

    def activate(self) -> None:
        self.cell.set(True)


@dataclass(frozen=True)
class ValueBinding:
    """A binding whose value comes from converting one token."""

    name: str
    cell: IStorageCell = field(repr=False, compare=False)
    converter: ITokenConverter[Any] = field(repr=False, compare=False)
    value_type: type = str

    def assign(self, token: str) -> ConversionResult[Any]:
        """Convert ``token`` and write it to the cell on success.

        The cell is left untouched when conversion fails.
        """
        result = self.converter.convert(token)
        if result.ok:
            self.cell.set(result.value)
        return result


@dataclass(frozen=True)
class OptionBinding(ValueBinding):
    """A named argument consuming the token that follows its name."""


@dataclass(frozen=True)
class PositionalBinding(ValueBinding):
    """An unnamed, required argument filled by its order on the command line."""

    position: int = 0
