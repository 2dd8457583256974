"""Environment-based terminal capability probing."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from relico.lib.logging import get_logger
from relico.lib.types import ColorLevel

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from relico.lib.formatting import FormatContext

logger = get_logger(__name__)

_CI_PROVIDERS: tuple[str, ...] = ("GITHUB_ACTIONS", "GITLAB_CI", "CIRCLECI")
_OTHER_CI_PROVIDERS: tuple[str, ...] = (
    "TRAVIS",
    "APPVEYOR",
    "JENKINS_URL",
    "BITBUCKET_BUILD_NUMBER",
    "TEAMCITY_VERSION",
)
_TRUECOLOR_TERMS = frozenset({"xterm-kitty", "wezterm", "iterm2"})


def _flag(env: Mapping[str, str], name: str) -> bool:
    return bool(env.get(name, ""))


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def is_disabled(env: Mapping[str, str], argv: Sequence[str]) -> bool:
    return _flag(env, "NO_COLOR") or "--no-color" in argv


def is_forced(env: Mapping[str, str], argv: Sequence[str]) -> bool:
    return _flag(env, "FORCE_COLOR") or "--color" in argv


def is_ci(env: Mapping[str, str]) -> bool:
    if not _flag(env, "CI"):
        return False
    return any(_flag(env, name) for name in (*_CI_PROVIDERS, *_OTHER_CI_PROVIDERS))


def supports_truecolor(env: Mapping[str, str]) -> bool:
    colorterm = env.get("COLORTERM", "").lower()
    term = env.get("TERM", "").lower()
    return (
        colorterm in {"truecolor", "24bit"}
        or term in _TRUECOLOR_TERMS
        or "256color" in term
    )


def _stream_is_tty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed streams raise instead of answering.
        return False


def _detect(env: Mapping[str, str], argv: Sequence[str], stream: TextIO | None) -> ColorLevel:
    if is_disabled(env, argv):
        return ColorLevel.OFF
    if is_forced(env, argv):
        return ColorLevel.TRUECOLOR
    if supports_truecolor(env):
        return ColorLevel.TRUECOLOR
    if _is_windows():
        if env.get("TERM_PROGRAM") == "vscode" or _flag(env, "WT_SESSION"):
            return ColorLevel.TRUECOLOR
        return ColorLevel.ANSI256
    if is_ci(env):
        return ColorLevel.ANSI256
    if _stream_is_tty(stream) and env.get("TERM") != "dumb":
        return ColorLevel.ANSI256
    return ColorLevel.OFF


def detect_color_level(
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
    stream: TextIO | None = None,
) -> ColorLevel:
    """Derive the capability level from flags, CI markers, TTY-ness and TERM hints."""

    level = _detect(
        os.environ if env is None else env,
        sys.argv if argv is None else argv,
        sys.stdout if stream is None else stream,
    )
    logger.debug("detected color level", level=int(level))
    return level


def terminal_name(env: Mapping[str, str] | None = None) -> str:
    """Best-effort human name of the hosting terminal."""

    env = os.environ if env is None else env
    if _flag(env, "WT_SESSION"):
        return "Windows Terminal"
    program = env.get("TERM_PROGRAM", "").strip()
    if program:
        return program
    term = env.get("TERM", "").strip()
    return term or "unknown"


@dataclass(frozen=True, slots=True)
class ColorSupport:
    is_color_supported: bool
    is_forced: bool
    is_disabled: bool
    terminal_name: str
    color_level: ColorLevel

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return "\n".join(
            (
                f"Level: {int(self.color_level)} ({self.color_level.label})",
                f"Supported: {'yes' if self.is_color_supported else 'no'}",
                f"Forced: {'yes' if self.is_forced else 'no'}",
                f"Disabled: {'yes' if self.is_disabled else 'no'}",
                f"Terminal: {self.terminal_name}",
            )
        )


def color_support(
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
) -> ColorSupport:
    """Snapshot of detection inputs alongside the level currently in effect."""

    from relico.lib.level import get_color_level

    env = os.environ if env is None else env
    argv = sys.argv if argv is None else argv
    level = get_color_level()
    return ColorSupport(
        is_color_supported=level != ColorLevel.OFF,
        is_forced=is_forced(env, argv),
        is_disabled=is_disabled(env, argv),
        terminal_name=terminal_name(env),
        color_level=level,
    )
