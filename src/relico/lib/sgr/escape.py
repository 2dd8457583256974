"""Render operations into SGR escape sequences for a capability level."""

from __future__ import annotations

from typing import Final

from relico.lib.cache import memo_table
from relico.lib.color.convert import ansi256_to_rgb, nearest_basic_index, rgb_to_ansi256
from relico.lib.sgr.ops import (
    Ansi256ColorOp,
    BasicColorOp,
    Operation,
    OperationList,
    StyleOp,
    TrueColorOp,
)
from relico.lib.types import ColorLevel, Layer

ESC: Final = "\x1b["
RESET: Final = f"{ESC}0m"

_FG_BASE: Final = 30
_BG_BASE: Final = 40
_FG_BRIGHT_BASE: Final = 90
_BG_BRIGHT_BASE: Final = 100

_open_sequences = memo_table("open-sequences")


def sgr(*codes: int) -> str:
    return f"{ESC}{';'.join(str(code) for code in codes)}m"


def lower(op: Operation, level: ColorLevel) -> Operation:
    """Degrade a color op to the richest form `level` can display."""

    if isinstance(op, TrueColorOp):
        if level >= ColorLevel.TRUECOLOR:
            return op
        if level == ColorLevel.ANSI256:
            return Ansi256ColorOp(op.layer, rgb_to_ansi256(op.rgb))
        return BasicColorOp(op.layer, nearest_basic_index(op.rgb), op.bright)
    if isinstance(op, Ansi256ColorOp) and level <= ColorLevel.BASIC:
        if op.code < 16:
            return BasicColorOp(op.layer, op.code % 8, op.code >= 8)
        return BasicColorOp(op.layer, nearest_basic_index(ansi256_to_rgb(op.code)))
    return op


def render(op: object, level: ColorLevel) -> str:
    """Open sequence for one op; unknown kinds and level OFF render as ''."""

    if level == ColorLevel.OFF:
        return ""
    if isinstance(op, StyleOp):
        return sgr(*op.codes) if op.codes else ""
    if not isinstance(op, BasicColorOp | Ansi256ColorOp | TrueColorOp):
        return ""

    lowered = lower(op, level)
    is_bg = lowered.layer == Layer.BG
    if isinstance(lowered, BasicColorOp):
        if lowered.bright:
            base = _BG_BRIGHT_BASE if is_bg else _FG_BRIGHT_BASE
        else:
            base = _BG_BASE if is_bg else _FG_BASE
        return sgr(base + lowered.index)
    if isinstance(lowered, Ansi256ColorOp):
        return sgr(48 if is_bg else 38, 5, lowered.code)
    if isinstance(lowered, TrueColorOp):
        rgb = lowered.rgb
        return sgr(48 if is_bg else 38, 2, rgb.r, rgb.g, rgb.b)
    return ""


def open_sequence(ops: OperationList, level: ColorLevel) -> str:
    """Concatenated open sequences, in list order, memoized per level."""

    if level == ColorLevel.OFF or not ops:
        return ""
    return _open_sequences.get_or_create(
        (level, ops),
        lambda: "".join(render(op, level) for op in ops),
    )
