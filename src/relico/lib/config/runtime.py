"""Active configuration and the palette derived from it.

`configure()` is the only writer. Theme or custom-color changes rebuild the
palette and clear every memo table; an explicit level goes through
`set_color_level`, which clears them as well.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, cast

from relico.lib.cache import STATE_LOCK, invalidate_all
from relico.lib.config.settings import FIELD_NAMES, RelicoConfig, coerce_value, load_settings
from relico.lib.level import redetect_color_level, set_color_level
from relico.lib.logging import get_logger
from relico.lib.palette import Palette

if TYPE_CHECKING:
    from pathlib import Path

    from relico.lib.types import ColorLevel

logger = get_logger(__name__)

_active = RelicoConfig()
_palette = Palette()


def get_config() -> RelicoConfig:
    return _active


def get_palette() -> Palette:
    return _palette


def is_strict() -> bool:
    return _active.strict


def _validated_changes(changes: dict[str, object]) -> dict[str, object]:
    unknown = sorted(set(changes) - FIELD_NAMES)
    if unknown:
        raise TypeError(f"Unknown relico config option(s): {', '.join(unknown)}")
    return {
        name: coerce_value(field_name=name, raw_value=value, source=name)
        for name, value in changes.items()
    }


def configure(config: RelicoConfig | None = None, /, **changes: object) -> RelicoConfig:
    """Merge `changes` into the active (or given) config and apply it.

    An explicit `color_level` becomes the current level. Passing
    `auto_detect=True` without a level re-runs the capability probe.
    """

    global _active, _palette
    validated = _validated_changes(changes)
    with STATE_LOCK:
        previous = _active
        base = previous if config is None else config
        updated = replace(base, **validated)  # type: ignore[arg-type]
        _active = updated

        if updated.theme != previous.theme or updated.custom_colors != previous.custom_colors:
            _palette = Palette(updated.theme, updated.custom_colors)
            invalidate_all("palette rebuilt")
        elif updated.strict != previous.strict:
            invalidate_all("strict mode changed")

        requested = dict(validated)
        if config is not None:
            requested.setdefault("color_level", config.color_level)
        level = cast("ColorLevel | None", requested.get("color_level"))
        if level is not None:
            set_color_level(level)
        elif validated.get("auto_detect") is True:
            redetect_color_level()

    logger.debug("relico configured", **updated.to_dict())
    return updated


def init_user_config(
    root: Path | None = None,
    overrides: dict[str, object] | None = None,
    *,
    user_settings_precedence: bool = False,
) -> RelicoConfig:
    """Apply file/env settings together with programmatic `overrides`.

    By default `overrides` win over file settings; with
    `user_settings_precedence=True` the file settings win instead.
    """

    file_settings = load_settings(root)
    programmatic = overrides or {}
    if user_settings_precedence:
        merged = {**programmatic, **file_settings}
    else:
        merged = {**file_settings, **programmatic}
    return configure(**merged)


def reset_config() -> None:
    """Restore the default configuration and palette."""

    global _active, _palette
    with STATE_LOCK:
        _active = RelicoConfig()
        _palette = Palette()
        invalidate_all("config reset")
