from .exceptions import (
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
from .structlog_config import LogFormat, configure_logging, get_logger

__all__ = [
    "ArgumentParserError",
    "ConversionFailureError",
    "DuplicateNameError",
    "ExcessTokenError",
    "InvalidNameError",
    "LogFormat",
    "MissingOptionValueError",
    "MissingPositionalError",
    "ParseError",
    "RegistrationError",
    "UnknownTokenError",
    "UnsupportedTypeError",
    "configure_logging",
    "get_logger",
]
