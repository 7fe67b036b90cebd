# Domain package

from .bindings import FlagBinding, OptionBinding, PositionalBinding, ValueBinding
from .conversion_result import ConversionResult
from .storage import AttributeCell, Cell

__all__ = [
    "AttributeCell",
    "Cell",
    "ConversionResult",
    "FlagBinding",
    "OptionBinding",
    "PositionalBinding",
    "ValueBinding",
]
