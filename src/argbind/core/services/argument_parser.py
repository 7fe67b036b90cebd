"""
Argument parser.

Registers flags, options and positionals against caller-owned storage cells
and maps a command-line token sequence onto them.

```python
verbose, count, name = Cell(False), Cell(0), Cell("")

parser = ArgumentParser("greet", "Say hello")
parser.add_flag("--verbose", verbose)
parser.add_option("--count", count)
parser.add_positional("name", name)

if not parser.parse_args(["--verbose", "--count", "5", "alice"]):
    raise SystemExit(2)
```
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, TextIO

from argbind.core.common.exceptions import (
    ArgumentParserError,
    DuplicateNameError,
    InvalidNameError,
    RegistrationError,
    UnsupportedTypeError,
)
from argbind.core.common.structlog_config import get_logger
from argbind.core.config.parser_config import ParserConfig
from argbind.core.domain.bindings import FlagBinding, OptionBinding, PositionalBinding
from argbind.core.domain.naming import (
    is_valid_flag_name,
    is_valid_option_name,
    is_valid_positional_name,
)
from argbind.core.interfaces.storage_cell_interface import IStorageCell
from argbind.core.interfaces.token_converter_interface import ITokenConverter
from argbind.core.services.converter_registry import ConverterRegistry
from argbind.core.services.converters import as_converter
from argbind.core.services.parse_state import ParseRun

logger = get_logger(__name__)


class ArgumentParser:
    """Registry of argument bindings plus a single tokenizing pass.

    Registration and parsing report failures by returning False after writing
    a diagnostic to the diagnostic stream. The error itself is kept in
    ``last_error`` so callers can tell the failure kinds apart.
    """

    def __init__(
        self,
        program_name: str,
        program_description: str = "",
        config: ParserConfig | None = None,
        converters: ConverterRegistry | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._program_name = program_name
        self._program_description = program_description
        self._config = config or ParserConfig()
        # Registrations on the default registry stay local to this parser.
        self._converters = converters or ConverterRegistry.with_defaults()
        self._stream = stream

        # flags and options share one namespace
        self._flags: dict[str, FlagBinding] = {}
        self._options: dict[str, OptionBinding] = {}
        # positionals are looked up by order; the set only guards names
        self._positional_names: set[str] = set()
        self._positionals: list[PositionalBinding] = []

        self.last_error: ArgumentParserError | None = None

    @property
    def program_name(self) -> str:
        return self._program_name

    @property
    def program_description(self) -> str:
        return self._program_description

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def converters(self) -> ConverterRegistry:
        return self._converters

    @property
    def flags(self) -> Mapping[str, FlagBinding]:
        return MappingProxyType(self._flags)

    @property
    def options(self) -> Mapping[str, OptionBinding]:
        return MappingProxyType(self._options)

    @property
    def positionals(self) -> tuple[PositionalBinding, ...]:
        return tuple(self._positionals)

    def add_flag(self, argument_name: str, cell: IStorageCell) -> bool:
        """Register a boolean switch.

        The cell is set to False, the flag default, here and at the start of
        every ``parse_args`` run.
        """
        return self._register(self._register_flag, argument_name, cell)

    def add_option(
        self,
        argument_name: str,
        cell: IStorageCell,
        value_type: type | None = None,
        converter: ITokenConverter[Any] | Callable[[str], Any] | None = None,
    ) -> bool:
        """Register a named argument that consumes the following token.

        Args:
            argument_name: Name matching ``-[-a-zA-Z]+``
            cell: Storage the converted value is written to
            value_type: Target type; inferred from the cell's value when omitted
            converter: Explicit strategy, bypassing the converter registry

        Returns:
            True when the option was registered
        """
        return self._register(
            self._register_option, argument_name, cell, value_type, converter
        )

    def add_positional(
        self,
        argument_name: str,
        cell: IStorageCell,
        value_type: type | None = None,
        converter: ITokenConverter[Any] | Callable[[str], Any] | None = None,
    ) -> bool:
        """Register a required argument filled by its position.

        Positionals are filled in registration order.
        """
        return self._register(
            self._register_positional, argument_name, cell, value_type, converter
        )

    def parse_args(self, args: Sequence[str] | None = None) -> bool:
        """Map a token sequence onto the registered bindings.

        Flag cells are reset to their default before the first token is read.

        Args:
            args: Tokens excluding the program name; ``sys.argv[1:]`` when None

        Returns:
            True when every token was consumed and every positional filled.
            On failure, cells may already hold values written before the
            failing token.

        Raises:
            ParseError: Only when ``config.raise_on_error`` is set
        """
        if isinstance(args, str):
            raise TypeError("args must be a sequence of tokens, not a string.")
        tokens = list(sys.argv[1:] if args is None else args)

        for flag in self._flags.values():
            flag.reset()

        run = ParseRun(self._flags, self._options, self._positionals)
        for token in tokens:
            if run.feed(token).is_terminal:
                break
        state = run.finish()

        if state.error is not None:
            self._fail(state.error)
            return False

        self.last_error = None
        logger.debug(
            "Parsed arguments",
            program=self._program_name,
            token_count=len(tokens),
        )
        return True

    def _register(self, register: Callable[..., None], *args: Any) -> bool:
        try:
            register(*args)
        except RegistrationError as e:
            self._fail(e)
            return False
        self.last_error = None
        return True

    def _register_flag(self, argument_name: str, cell: IStorageCell) -> None:
        if not is_valid_flag_name(argument_name):
            raise InvalidNameError(
                f"`{argument_name}` is not an appropriate flag name",
                argument_name=argument_name,
            )
        self._ensure_named_available(argument_name)

        binding = FlagBinding(name=argument_name, cell=cell)
        binding.reset()
        self._flags[argument_name] = binding
        logger.debug("Registered flag", argument_name=argument_name)

    def _register_option(
        self,
        argument_name: str,
        cell: IStorageCell,
        value_type: type | None,
        converter: ITokenConverter[Any] | Callable[[str], Any] | None,
    ) -> None:
        if not is_valid_option_name(argument_name):
            raise InvalidNameError(
                f"`{argument_name}` is not an appropriate option name",
                argument_name=argument_name,
            )
        self._ensure_named_available(argument_name)

        value_type, strategy = self._resolve_converter(
            argument_name, cell, value_type, converter
        )
        self._options[argument_name] = OptionBinding(
            name=argument_name, cell=cell, converter=strategy, value_type=value_type
        )
        logger.debug(
            "Registered option",
            argument_name=argument_name,
            value_type=value_type.__name__,
        )

    def _register_positional(
        self,
        argument_name: str,
        cell: IStorageCell,
        value_type: type | None,
        converter: ITokenConverter[Any] | Callable[[str], Any] | None,
    ) -> None:
        if not is_valid_positional_name(argument_name):
            raise InvalidNameError(
                f"`{argument_name}` is not an appropriate positional name, "
                "must be an identifier",
                argument_name=argument_name,
            )
        if argument_name in self._positional_names:
            raise DuplicateNameError(
                f"another positional with name `{argument_name}` has already "
                "been registered",
                argument_name=argument_name,
            )

        value_type, strategy = self._resolve_converter(
            argument_name, cell, value_type, converter
        )
        self._positional_names.add(argument_name)
        self._positionals.append(
            PositionalBinding(
                name=argument_name,
                cell=cell,
                converter=strategy,
                value_type=value_type,
                position=len(self._positionals),
            )
        )
        logger.debug(
            "Registered positional",
            argument_name=argument_name,
            value_type=value_type.__name__,
            position=len(self._positionals) - 1,
        )

    def _ensure_named_available(self, argument_name: str) -> None:
        if argument_name in self._flags or argument_name in self._options:
            raise DuplicateNameError(
                f"`{argument_name}` has been already registered",
                argument_name=argument_name,
            )

    def _resolve_converter(
        self,
        argument_name: str,
        cell: IStorageCell,
        value_type: type | None,
        converter: ITokenConverter[Any] | Callable[[str], Any] | None,
    ) -> tuple[type, ITokenConverter[Any]]:
        if value_type is None:
            current = cell.get()
            value_type = str if current is None else type(current)

        if converter is not None:
            return value_type, as_converter(converter)

        strategy = self._converters.get(value_type)
        if strategy is None:
            raise UnsupportedTypeError(
                f"`{argument_name}` is bound to type `{value_type.__name__}` "
                "which has no registered converter",
                argument_name=argument_name,
                details={"value_type": value_type.__name__},
            )
        return value_type, strategy

    def _fail(self, error: ArgumentParserError) -> None:
        self.last_error = error
        logger.info(
            "Argument handling failed",
            program=self._program_name,
            error_type=type(error).__name__,
            **error.details,
        )
        if self._config.emit_diagnostics:
            stream = self._stream if self._stream is not None else sys.stderr
            stream.write(f"{self._config.diagnostic_prefix}{error.message}\n")
        if self._config.raise_on_error:
            raise error
