"""
Storage cells.

The parser never owns the values it produces. Callers hand it a cell and read
the value back from that same cell after parsing.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Cell(Generic[T]):
    """A mutable box holding a single value.

    ```python
    verbose = Cell(False)
    parser.add_flag("--verbose", verbose)
    parser.parse_args(["--verbose"])
    assert verbose.value is True
    ```
    """

    __slots__ = ("value",)

    def __init__(self, value: T | None = None) -> None:
        self.value = value

    def get(self) -> T | None:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


class AttributeCell:
    """A cell that reads and writes one attribute of a caller object.

    Useful for binding straight onto a namespace or dataclass instance.
    """

    __slots__ = ("target", "attribute")

    def __init__(self, target: Any, attribute: str) -> None:
        if not attribute.isidentifier():
            raise ValueError(f"'{attribute}' is not a valid attribute name.")
        self.target = target
        self.attribute = attribute

    def get(self) -> Any:
        return getattr(self.target, self.attribute, None)

    def set(self, value: Any) -> None:
        setattr(self.target, self.attribute, value)

    def __repr__(self) -> str:
        return f"AttributeCell({type(self.target).__name__}.{self.attribute})"
