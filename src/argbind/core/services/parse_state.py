"""
Parse loop state machine.

A ``ParseRun`` walks the token sequence one token at a time. Each call to
``feed`` returns the new state; once the run reaches ``FAILED`` it ignores
further input, and ``finish`` settles the final state once input is exhausted.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from argbind.core.common.exceptions import (
    ConversionFailureError,
    ExcessTokenError,
    MissingOptionValueError,
    MissingPositionalError,
    ParseError,
    UnknownTokenError,
)
from argbind.core.domain.bindings import FlagBinding, OptionBinding, PositionalBinding
from argbind.core.domain.naming import is_valid_option_name


class ParseStateKind(str, Enum):
    AWAITING_TOKEN = "awaiting_token"
    AWAITING_OPTION_VALUE = "awaiting_option_value"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ParseState:
    kind: ParseStateKind
    pending: OptionBinding | None = None
    error: ParseError | None = None

    @classmethod
    def awaiting_token(cls) -> ParseState:
        return cls(ParseStateKind.AWAITING_TOKEN)

    @classmethod
    def awaiting_option_value(cls, binding: OptionBinding) -> ParseState:
        return cls(ParseStateKind.AWAITING_OPTION_VALUE, pending=binding)

    @classmethod
    def done(cls) -> ParseState:
        return cls(ParseStateKind.DONE)

    @classmethod
    def failed(cls, error: ParseError) -> ParseState:
        return cls(ParseStateKind.FAILED, error=error)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (ParseStateKind.DONE, ParseStateKind.FAILED)


class ParseRun:
    """One pass of the parse loop over a token sequence."""

    def __init__(
        self,
        flags: Mapping[str, FlagBinding],
        options: Mapping[str, OptionBinding],
        positionals: Sequence[PositionalBinding],
    ) -> None:
        self._flags = flags
        self._options = options
        self._positionals = positionals
        self.cursor = 0
        self.state = ParseState.awaiting_token()

    def feed(self, token: str) -> ParseState:
        """Advance the state machine by one token."""
        if self.state.kind is ParseStateKind.AWAITING_OPTION_VALUE:
            self.state = self._consume_option_value(token)
        elif self.state.kind is ParseStateKind.AWAITING_TOKEN:
            self.state = self._dispatch(token)
        return self.state

    def finish(self) -> ParseState:
        """Settle the final state once the token sequence is exhausted."""
        if self.state.kind is ParseStateKind.AWAITING_OPTION_VALUE:
            name = self._pending_option().name
            self.state = ParseState.failed(
                MissingOptionValueError(
                    f"option `{name}` expects a value but none was given",
                    argument_name=name,
                )
            )
        elif self.state.kind is ParseStateKind.AWAITING_TOKEN:
            missing = [b.name for b in self._positionals[self.cursor :]]
            if missing:
                self.state = ParseState.failed(
                    MissingPositionalError(
                        "missing required positional argument(s): "
                        + ", ".join(f"`{name}`" for name in missing),
                        missing=missing,
                    )
                )
            else:
                self.state = ParseState.done()
        return self.state

    def _dispatch(self, token: str) -> ParseState:
        flag = self._flags.get(token)
        if flag is not None:
            flag.activate()
            return ParseState.awaiting_token()

        option = self._options.get(token)
        if option is not None:
            return ParseState.awaiting_option_value(option)

        if self.cursor < len(self._positionals):
            positional = self._positionals[self.cursor]
            result = positional.assign(token)
            if not result.ok:
                return ParseState.failed(
                    ConversionFailureError(
                        f"positional `{positional.name}`: {result.reason}",
                        argument_name=positional.name,
                        token=token,
                    )
                )
            self.cursor += 1
            return ParseState.awaiting_token()

        # Every positional is filled: a token shaped like an option name was
        # meant as one, anything else is one value too many.
        if is_valid_option_name(token):
            return ParseState.failed(
                UnknownTokenError(f"unrecognized argument `{token}`", token=token)
            )
        return ParseState.failed(
            ExcessTokenError(f"unexpected extra argument `{token}`", token=token)
        )

    def _consume_option_value(self, token: str) -> ParseState:
        option = self._pending_option()
        result = option.assign(token)
        if not result.ok:
            return ParseState.failed(
                ConversionFailureError(
                    f"option `{option.name}`: {result.reason}",
                    argument_name=option.name,
                    token=token,
                )
            )
        return ParseState.awaiting_token()

    def _pending_option(self) -> OptionBinding:
        option = self.state.pending
        if option is None:
            raise RuntimeError("No option is waiting for a value.")
        return option
