"""Wrap text in the escape sequences of an operation list."""

from __future__ import annotations

import re

from relico.lib.level import get_color_level
from relico.lib.sgr.escape import RESET, open_sequence
from relico.lib.sgr.ops import OperationList
from relico.lib.types import ColorLevel

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m|\x1b\]8;[^\x07\x1b]*(?:\x07|\x1b\\)")


def strip_ansi(text: str) -> str:
    """Remove SGR sequences and OSC 8 hyperlink wrappers."""

    return _ANSI_PATTERN.sub("", text)


def _wrap_line(line: str, opener: str) -> str:
    if line.endswith("\r"):
        content = line[:-1]
        if not content:
            return line
        return f"{opener}{content}{RESET}\r"
    if not line:
        return line
    return f"{opener}{line}{RESET}"


def apply_ops(ops: OperationList, text: object, level: ColorLevel | None = None) -> str:
    """Render `text` under `ops` at `level` (the current level by default).

    Every line is opened and reset on its own so styling never leaks across
    a newline. Empty lines are left bare.
    """

    value = text if isinstance(text, str) else str(text)
    if not ops or not value:
        return value
    if level is None:
        level = get_color_level()
    opener = open_sequence(ops, level)
    if not opener:
        return value
    if "\n" not in value:
        return _wrap_line(value, opener)
    return "\n".join(_wrap_line(line, opener) for line in value.split("\n"))
