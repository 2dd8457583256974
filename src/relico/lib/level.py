"""Process-wide capability level.

The level is read when text is formatted, not when a formatter is built, so a
formatter created at one level renders at whatever level is current when it
is called. Changing the level clears every memo table under the state lock.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from relico.lib.cache import STATE_LOCK, invalidate_all
from relico.lib.detect import detect_color_level
from relico.lib.errors import InvalidColorLevelError
from relico.lib.logging import get_logger
from relico.lib.types import ColorLevel

logger = get_logger(__name__)

CapabilityProbe: TypeAlias = Callable[[], int]

_probe: CapabilityProbe = detect_color_level
_current: ColorLevel | None = None


def coerce_level(level: object) -> ColorLevel:
    """Validate a raw level value; bools and non-integers are rejected."""

    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidColorLevelError(level)
    try:
        return ColorLevel(level)
    except ValueError:
        raise InvalidColorLevelError(level) from None


def get_color_level() -> ColorLevel:
    """Return the current level, running the probe on first use."""

    global _current
    current = _current
    if current is not None:
        return current
    with STATE_LOCK:
        if _current is None:
            _current = coerce_level(_probe())
        return _current


def set_color_level(level: int) -> None:
    """Set the level (0 off, 1 basic, 2 256-color, 3 truecolor)."""

    global _current
    validated = coerce_level(level)
    with STATE_LOCK:
        if _current == validated:
            return
        previous = _current
        _current = validated
        invalidate_all("color level changed")
    logger.debug(
        "color level changed",
        previous=None if previous is None else int(previous),
        level=int(validated),
    )


def redetect_color_level() -> ColorLevel:
    """Run the probe again and adopt its answer."""

    level = coerce_level(_probe())
    set_color_level(level)
    return level


def use_probe(probe: CapabilityProbe) -> None:
    """Install a different capability probe and forget the detected level."""

    global _probe, _current
    with STATE_LOCK:
        _probe = probe
        _current = None
        invalidate_all("capability probe replaced")
