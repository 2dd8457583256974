"""Error taxonomy for relico.

Only invalid capability levels fail by default. Malformed colors and unknown
chain properties degrade silently unless strict mode is enabled.
"""

from __future__ import annotations


class RelicoError(Exception):
    """Base class for all relico errors."""


class InvalidColorLevelError(RelicoError, ValueError):
    """Raised when a capability level outside 0..3 is requested."""

    def __init__(self, level: object) -> None:
        super().__init__(f"Invalid color level {level!r}: expected one of 0, 1, 2, 3.")
        self.level = level


class InvalidColorError(RelicoError, ValueError):
    """Raised in strict mode when a color input cannot be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid color {value!r}.")
        self.value = value


class UnknownStyleError(RelicoError, AttributeError):
    """Raised in strict mode when a chain property name is not recognized."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown style or color '{name}'.")
        self.name = name
