"""Shared fixtures for the argbind test suite."""

import io
from dataclasses import dataclass

import pytest
import structlog
from argbind import ArgumentParser, Cell


@dataclass
class GreetCells:
    verbose: Cell
    count: Cell
    name: Cell


@pytest.fixture
def diagnostics() -> io.StringIO:
    """Stream collecting diagnostics written by a parser."""
    return io.StringIO()


@pytest.fixture
def parser(diagnostics: io.StringIO) -> ArgumentParser:
    return ArgumentParser("prog", "A test program", stream=diagnostics)


@pytest.fixture
def greet_cells() -> GreetCells:
    return GreetCells(verbose=Cell(False), count=Cell(0), name=Cell(""))


@pytest.fixture
def greet_parser(parser: ArgumentParser, greet_cells: GreetCells) -> ArgumentParser:
    """Parser with a flag, an int option and a text positional registered."""
    assert parser.add_flag("--verbose", greet_cells.verbose)
    assert parser.add_option("--count", greet_cells.count, int)
    assert parser.add_positional("name", greet_cells.name, str)
    return parser


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
