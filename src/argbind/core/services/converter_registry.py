"""
Registry of token converters keyed by target type.

The parser resolves a converter for every option and positional at
registration time. New types are supported by registering a converter here;
the parser itself never changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from argbind.core.interfaces.token_converter_interface import ITokenConverter
from argbind.core.services.converters import (
    FloatConverter,
    IntegerConverter,
    TextConverter,
    as_converter,
)

logger = logging.getLogger(__name__)


class ConverterRegistry:
    """
    Mapping from value types to conversion strategies.

    Lookup is by exact type. ``bool`` is not served by the
    ``int`` converter even though it subclasses ``int``.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._converters: dict[type, ITokenConverter[Any]] = {}

    @classmethod
    def with_defaults(cls) -> ConverterRegistry:
        """Create a registry holding the integer, float and text converters."""
        registry = cls()
        registry.register(int, IntegerConverter())
        registry.register(float, FloatConverter())
        registry.register(str, TextConverter())
        return registry

    def register(
        self,
        value_type: type,
        converter: ITokenConverter[Any] | Callable[[str], Any],
        *,
        replace: bool = False,
    ) -> None:
        """
        Register a converter for a type.

        Args:
            value_type: The type produced by the converter
            converter: An ``ITokenConverter`` or a callable taking the raw token
            replace: Allow overriding an existing registration

        Raises:
            TypeError: If value_type is not a type or converter is not usable
            ValueError: If the type already has a converter and replace is False
        """
        if not isinstance(value_type, type):
            raise TypeError("Converter key must be a type.")
        if not callable(converter) and not callable(getattr(converter, "convert", None)):
            raise TypeError("Converter must be callable or provide convert().")
        if value_type in self._converters and not replace:
            raise ValueError(
                f"A converter for '{value_type.__name__}' is already registered."
            )

        self._converters[value_type] = as_converter(converter)
        logger.debug(f"Registered converter for type: {value_type.__name__}")

    def get(self, value_type: type) -> ITokenConverter[Any] | None:
        """Return the converter for ``value_type``, or None when unknown."""
        return self._converters.get(value_type)
