"""Naming rules for registered arguments."""

from __future__ import annotations

import re

FLAG_NAME_PATTERN = re.compile(r"-[-a-zA-Z]+")
OPTION_NAME_PATTERN = FLAG_NAME_PATTERN
POSITIONAL_NAME_PATTERN = re.compile(r"[_a-zA-Z][_a-zA-Z0-9]*")


def is_valid_flag_name(name: str) -> bool:
    return FLAG_NAME_PATTERN.fullmatch(name) is not None


def is_valid_option_name(name: str) -> bool:
    return OPTION_NAME_PATTERN.fullmatch(name) is not None


def is_valid_positional_name(name: str) -> bool:
    return POSITIONAL_NAME_PATTERN.fullmatch(name) is not None
