import pytest
from pydantic import ValidationError

from argbind.core.config.parser_config import DEFAULT_DIAGNOSTIC_PREFIX, ParserConfig


def test_defaults() -> None:
    config = ParserConfig()
    assert config.diagnostic_prefix == DEFAULT_DIAGNOSTIC_PREFIX == "[ERROR]: "
    assert config.raise_on_error is False
    assert config.emit_diagnostics is True


def test_config_is_frozen() -> None:
    config = ParserConfig()
    with pytest.raises(ValidationError):
        config.raise_on_error = True  # type: ignore[misc]


def test_multiline_prefix_rejected() -> None:
    with pytest.raises(ValidationError, match="single line"):
        ParserConfig(diagnostic_prefix="error:\n")


def test_repr_is_concise() -> None:
    assert repr(ParserConfig()) == "<ParserConfig>"
