from __future__ import annotations

from typing import Any, Protocol


class IStorageCell(Protocol):
    """Caller-owned storage the parser writes converted values into.

    The parser only keeps a handle to the cell; the value itself lives with
    the caller and must stay reachable for as long as the parser is used.
    """

    def get(self) -> Any:
        """Return the value currently held by the cell."""
        ...

    def set(self, value: Any) -> None:
        """Replace the value held by the cell."""
        ...
