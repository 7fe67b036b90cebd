"""Tests for caller-owned storage cells."""

from types import SimpleNamespace

import pytest
from argbind.core.domain.storage import AttributeCell, Cell


class TestCell:
    def test_defaults_to_none(self) -> None:
        assert Cell().get() is None

    def test_set_and_get(self) -> None:
        cell = Cell(1)
        cell.set(5)
        assert cell.value == 5
        assert cell.get() == 5

    def test_repr(self) -> None:
        assert repr(Cell("x")) == "Cell('x')"


class TestAttributeCell:
    def test_writes_through_to_target(self) -> None:
        namespace = SimpleNamespace(count=0)
        cell = AttributeCell(namespace, "count")
        cell.set(3)
        assert namespace.count == 3
        assert cell.get() == 3

    def test_missing_attribute_reads_as_none(self) -> None:
        assert AttributeCell(SimpleNamespace(), "absent").get() is None

    def test_rejects_non_identifier(self) -> None:
        with pytest.raises(ValueError, match="not a valid attribute name"):
            AttributeCell(SimpleNamespace(), "not-valid")
