"""
Common exception classes for argbind.

This module defines the error taxonomy used by the argument parser. Errors
are split into registration-time errors and parse-time errors so callers can
tell a programming mistake apart from bad user input.
"""

from __future__ import annotations


class ArgumentParserError(Exception):
    """Base exception class for all argument parser errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }
        return {"error": error_dict}


class RegistrationError(ArgumentParserError):
    """Raised when a flag, option or positional cannot be registered."""

    def __init__(
        self,
        message: str = "Registration failed",
        argument_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        if argument_name is not None:
            det.setdefault("argument_name", argument_name)
        super().__init__(message, det, **kwargs)
        self.argument_name = argument_name


class InvalidNameError(RegistrationError):
    """Raised when an argument name does not match its naming rule."""

    def __init__(
        self,
        message: str = "Invalid argument name",
        argument_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, argument_name=argument_name, details=details, **kwargs)


class DuplicateNameError(RegistrationError):
    """Raised when an argument name collides with one already registered."""

    def __init__(
        self,
        message: str = "Argument name already registered",
        argument_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, argument_name=argument_name, details=details, **kwargs)


class UnsupportedTypeError(RegistrationError):
    """Raised when no converter is known for the requested value type."""

    def __init__(
        self,
        message: str = "No converter registered for type",
        argument_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, argument_name=argument_name, details=details, **kwargs)


class ParseError(ArgumentParserError):
    """Raised when the token sequence cannot be mapped onto the bindings."""

    def __init__(
        self,
        message: str = "Parsing failed",
        argument_name: str | None = None,
        token: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        if argument_name is not None:
            det.setdefault("argument_name", argument_name)
        if token is not None:
            det.setdefault("token", token)
        super().__init__(message, det, **kwargs)
        self.argument_name = argument_name
        self.token = token


class ConversionFailureError(ParseError):
    def __init__(
        self,
        message: str = "Token could not be converted",
        argument_name: str | None = None,
        token: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(
            message, argument_name=argument_name, token=token, details=details, **kwargs
        )


class UnknownTokenError(ParseError):
    def __init__(
        self,
        message: str = "Unrecognized token",
        token: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, token=token, details=details, **kwargs)


class MissingOptionValueError(ParseError):
    def __init__(
        self,
        message: str = "Option is missing its value",
        argument_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, argument_name=argument_name, details=details, **kwargs)


class MissingPositionalError(ParseError):
    """Raised when fewer positional tokens than positionals were supplied."""

    def __init__(
        self,
        message: str = "Missing required positional argument",
        missing: list[str] | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        det.setdefault("missing", list(missing or []))
        super().__init__(message, details=det, **kwargs)
        self.missing = list(missing or [])


class ExcessTokenError(ParseError):
    def __init__(
        self,
        message: str = "Too many positional arguments",
        token: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, token=token, details=details, **kwargs)
