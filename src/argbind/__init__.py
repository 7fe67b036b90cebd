"""argbind: bind command-line flags, options and positionals to typed cells."""

__version__ = "0.1.0"

from .core.common.exceptions import (
    ArgumentParserError,
    ConversionFailureError,
    DuplicateNameError,
    ExcessTokenError,
    InvalidNameError,
    MissingOptionValueError,
    MissingPositionalError,
    ParseError,
    RegistrationError,
    UnknownTokenError,
    UnsupportedTypeError,
)
from .core.common.structlog_config import LogFormat, configure_logging
from .core.config.parser_config import ParserConfig
from .core.domain.bindings import FlagBinding, OptionBinding, PositionalBinding
from .core.domain.conversion_result import ConversionResult
from .core.domain.storage import AttributeCell, Cell
from .core.services.argument_parser import ArgumentParser
from .core.services.converter_registry import ConverterRegistry
from .core.services.converters import (
    CallableConverter,
    FloatConverter,
    IntegerConverter,
    TextConverter,
)

__all__ = [
    "ArgumentParser",
    "ArgumentParserError",
    "AttributeCell",
    "CallableConverter",
    "Cell",
    "ConversionFailureError",
    "ConversionResult",
    "ConverterRegistry",
    "DuplicateNameError",
    "ExcessTokenError",
    "FlagBinding",
    "FloatConverter",
    "IntegerConverter",
    "InvalidNameError",
    "LogFormat",
    "MissingOptionValueError",
    "MissingPositionalError",
    "OptionBinding",
    "ParseError",
    "ParserConfig",
    "PositionalBinding",
    "RegistrationError",
    "TextConverter",
    "UnknownTokenError",
    "UnsupportedTypeError",
    "configure_logging",
]
