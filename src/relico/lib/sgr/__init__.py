"""SGR operations and escape-sequence rendering."""

from relico.lib.sgr.escape import ESC, RESET, lower, open_sequence, render, sgr
from relico.lib.sgr.ops import (
    Ansi256ColorOp,
    BasicColorOp,
    Operation,
    OperationList,
    StyleOp,
    TrueColorOp,
)

__all__ = [
    "ESC",
    "RESET",
    "Ansi256ColorOp",
    "BasicColorOp",
    "Operation",
    "OperationList",
    "StyleOp",
    "TrueColorOp",
    "lower",
    "open_sequence",
    "render",
    "sgr",
]
