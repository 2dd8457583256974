"""File and environment configuration loader."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import TypeAlias, cast

from relico.lib.color.names import FORMATTER_ATTRIBUTES, RESTRICTED_KEYS
from relico.lib.level import coerce_level
from relico.lib.types import ColorLevel, Theme

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "relico.toml"
PYPROJECT_FILENAME = "pyproject.toml"

CustomColors: TypeAlias = Mapping[str, tuple[str, str]]


def _empty_custom_colors() -> CustomColors:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RelicoConfig:
    """Resolved runtime configuration."""

    # None means the level comes from the capability probe.
    color_level: ColorLevel | None = None
    theme: Theme = Theme.PRIMARY
    custom_colors: CustomColors = field(default_factory=_empty_custom_colors)
    auto_detect: bool = True
    strict: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "color_level": None if self.color_level is None else int(self.color_level),
            "theme": str(self.theme),
            "custom_colors": {name: list(pair) for name, pair in self.custom_colors.items()},
            "auto_detect": self.auto_detect,
            "strict": self.strict,
        }


# File keys accepted for each field; camelCase spellings match JS-style configs.
_KEY_MAP: dict[str, str] = {
    "color_level": "color_level",
    "colorLevel": "color_level",
    "theme": "theme",
    "custom_colors": "custom_colors",
    "customColors": "custom_colors",
    "auto_detect": "auto_detect",
    "autoDetect": "auto_detect",
    "strict": "strict",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "RELICO_COLOR_LEVEL": "color_level",
    "RELICO_THEME": "theme",
    "RELICO_STRICT": "strict",
}

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})

FIELD_NAMES = frozenset(item.name for item in fields(RelicoConfig))


def _type_error(source: str, expected: str, raw_value: object) -> ValueError:
    return ValueError(
        f"Invalid value for '{source}': expected {expected}, got "
        f"{type(raw_value).__name__} ({raw_value!r})."
    )


def _coerce_level(*, raw_value: object, source: str) -> ColorLevel | None:
    if raw_value is None:
        return None
    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise _type_error(source, "int", raw_value)
    try:
        return coerce_level(raw_value)
    except ValueError as error:
        raise ValueError(
            f"Invalid value for '{source}': expected one of 0, 1, 2, 3, got {raw_value!r}."
        ) from error


def _coerce_theme(*, raw_value: object, source: str) -> Theme:
    if not isinstance(raw_value, str):
        raise _type_error(source, "str", raw_value)
    normalized = raw_value.strip().lower()
    try:
        return Theme(normalized)
    except ValueError as error:
        raise ValueError(
            f"Invalid value for '{source}': expected one of "
            f"{sorted(str(theme) for theme in Theme)}, got {raw_value!r}."
        ) from error


def _coerce_bool(*, raw_value: object, source: str) -> bool:
    if not isinstance(raw_value, bool):
        raise _type_error(source, "bool", raw_value)
    return raw_value


def _coerce_color_pair(*, raw_value: object, source: str) -> tuple[str, str]:
    if isinstance(raw_value, str):
        raw_value = [raw_value, raw_value]
    if not isinstance(raw_value, list | tuple) or len(raw_value) != 2:
        raise _type_error(source, "str or array of two str", raw_value)

    parsed: list[str] = []
    for item in cast("list[object]", list(raw_value)):
        if not isinstance(item, str):
            raise _type_error(source, "array[str]", item)
        normalized = item.strip()
        if not normalized:
            raise ValueError(f"Invalid value for '{source}': expected non-empty color.")
        parsed.append(normalized)
    return parsed[0], parsed[1]


def coerce_custom_colors(*, raw_value: object, source: str) -> CustomColors:
    """Validate a custom color table.

    Style keys and names of formatter methods are dropped with a warning.
    """

    if not isinstance(raw_value, dict | MappingProxyType):
        raise ValueError(f"Invalid value for '{source}': expected table.")

    colors: dict[str, tuple[str, str]] = {}
    for key, value in cast("Mapping[str, object]", raw_value).items():
        if key in RESTRICTED_KEYS:
            logger.warning("Ignoring restricted custom color key '%s.%s'.", source, key)
            continue
        if key.lower() in FORMATTER_ATTRIBUTES:
            logger.warning(
                "Ignoring custom color key '%s.%s': it shadows a formatter method.",
                source,
                key,
            )
            continue
        colors[key] = _coerce_color_pair(raw_value=value, source=f"{source}.{key}")
    return MappingProxyType(colors)


def coerce_value(*, field_name: str, raw_value: object, source: str) -> object:
    """Validate one raw value for a `RelicoConfig` field."""

    if field_name == "color_level":
        return _coerce_level(raw_value=raw_value, source=source)
    if field_name == "theme":
        return _coerce_theme(raw_value=raw_value, source=source)
    if field_name == "custom_colors":
        return coerce_custom_colors(raw_value=raw_value, source=source)
    return _coerce_bool(raw_value=raw_value, source=source)


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    normalized = raw_value.strip()
    if field_name == "color_level":
        try:
            level = int(normalized)
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error
        return _coerce_level(raw_value=level, source=env_name)

    if field_name == "theme":
        return _coerce_theme(raw_value=normalized, source=env_name)

    lowered = normalized.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(
        f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
    )


def _apply_toml_payload(*, values: dict[str, object], payload: Mapping[str, object]) -> None:
    for key, raw_value in payload.items():
        field_name = _KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown relico config key '%s'.", key)
            continue
        values[field_name] = coerce_value(
            field_name=field_name,
            raw_value=raw_value,
            source=key,
        )


def _read_payload(root: Path) -> Mapping[str, object] | None:
    path = root / CONFIG_FILENAME
    if path.is_file():
        return cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return None
    document = cast("dict[str, object]", tomllib.loads(pyproject.read_text(encoding="utf-8")))
    tool = document.get("tool")
    if not isinstance(tool, dict):
        return None
    section = cast("dict[str, object]", tool).get("relico")
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ValueError(f"Invalid value for 'tool.relico' in '{pyproject}': expected table.")
    return cast("dict[str, object]", section)


def _apply_env_overrides(values: dict[str, object], env: Mapping[str, str]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = env.get(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def load_settings(
    root: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> dict[str, object]:
    """Return only the fields set by the config file or environment."""

    values: dict[str, object] = {}
    payload = _read_payload(Path.cwd() if root is None else root)
    if payload is not None:
        _apply_toml_payload(values=values, payload=payload)
    _apply_env_overrides(values, os.environ if env is None else env)
    return values


def load_config(
    root: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> RelicoConfig:
    """Load `relico.toml` (or `[tool.relico]` in pyproject.toml) plus env overrides."""

    values = load_settings(root, env)
    defaults = RelicoConfig()
    return RelicoConfig(
        color_level=cast("ColorLevel | None", values.get("color_level", defaults.color_level)),
        theme=cast("Theme", values.get("theme", defaults.theme)),
        custom_colors=cast("CustomColors", values.get("custom_colors", defaults.custom_colors)),
        auto_detect=cast("bool", values.get("auto_detect", defaults.auto_detect)),
        strict=cast("bool", values.get("strict", defaults.strict)),
    )
