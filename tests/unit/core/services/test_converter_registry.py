from pathlib import Path

import pytest
from argbind.core.services.converter_registry import ConverterRegistry
from argbind.core.services.converters import (
    CallableConverter,
    FloatConverter,
    IntegerConverter,
    TextConverter,
)


class TestConverterRegistry:
    @pytest.fixture
    def registry(self) -> ConverterRegistry:
        return ConverterRegistry.with_defaults()

    def test_defaults(self, registry: ConverterRegistry) -> None:
        assert isinstance(registry.get(int), IntegerConverter)
        assert isinstance(registry.get(float), FloatConverter)
        assert isinstance(registry.get(str), TextConverter)

    def test_empty_registry(self) -> None:
        registry = ConverterRegistry()
        assert registry.get(int) is None

    def test_lookup_is_exact(self, registry: ConverterRegistry) -> None:
        assert registry.get(bool) is None

    def test_registrations_are_per_registry(self, registry: ConverterRegistry) -> None:
        registry.register(Path, Path)
        assert ConverterRegistry.with_defaults().get(Path) is None

    def test_register_callable(self, registry: ConverterRegistry) -> None:
        registry.register(Path, Path)
        converter = registry.get(Path)
        assert isinstance(converter, CallableConverter)
        assert converter.convert("a/b").value == Path("a/b")

    def test_duplicate_registration_rejected(self, registry: ConverterRegistry) -> None:
        with pytest.raises(ValueError, match="already registered"):
            registry.register(int, IntegerConverter())

    def test_replace(self, registry: ConverterRegistry) -> None:
        bounded = IntegerConverter(min_value=0)
        registry.register(int, bounded, replace=True)
        assert registry.get(int) is bounded

    def test_key_must_be_type(self, registry: ConverterRegistry) -> None:
        with pytest.raises(TypeError, match="must be a type"):
            registry.register("int", int)  # type: ignore[arg-type]

    def test_converter_must_be_usable(self, registry: ConverterRegistry) -> None:
        with pytest.raises(TypeError, match="callable"):
            registry.register(Path, 42)  # type: ignore[arg-type]
