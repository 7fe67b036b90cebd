"""
Parser configuration.

Settings that control how an ``ArgumentParser`` reports failures. There is no
file or environment loading; callers construct the model directly.
"""

from __future__ import annotations

from pydantic import ConfigDict, field_validator

from argbind.core.interfaces.model_bases import DomainModel

DEFAULT_DIAGNOSTIC_PREFIX = "[ERROR]: "


class ParserConfig(DomainModel):
    """Diagnostic and error-propagation settings for a parser."""

    model_config = ConfigDict(frozen=True)

    # Prepended to every line written to the diagnostic stream.
    diagnostic_prefix: str = DEFAULT_DIAGNOSTIC_PREFIX
    # Re-raise the ArgumentParserError after reporting instead of returning False.
    raise_on_error: bool = False
    emit_diagnostics: bool = True

    @field_validator("diagnostic_prefix")
    @classmethod
    def validate_diagnostic_prefix(cls, v: str) -> str:
        """Reject prefixes that would split a diagnostic over several lines."""
        if "\n" in v:
            raise ValueError("diagnostic_prefix must be a single line")
        return v
