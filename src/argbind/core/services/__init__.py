from .argument_parser import ArgumentParser
from .converter_registry import ConverterRegistry
from .converters import CallableConverter, FloatConverter, IntegerConverter, TextConverter
from .parse_state import ParseRun, ParseState, ParseStateKind

__all__ = [
    "ArgumentParser",
    "CallableConverter",
    "ConverterRegistry",
    "FloatConverter",
    "IntegerConverter",
    "ParseRun",
    "ParseState",
    "ParseStateKind",
    "TextConverter",
]
