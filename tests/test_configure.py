"""Runtime configuration: configure(), init_user_config() and resets."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from relico.lib.cache import table_sizes
from relico.lib.config import configure, get_config, get_palette, init_user_config
from relico.lib.formatter import re
from relico.lib.level import get_color_level, set_color_level, use_probe
from relico.lib.types import ColorLevel, Theme


def test_configure_merges_into_active_config() -> None:
    configure(theme="secondary")
    configure(strict=True)

    config = get_config()
    assert config.theme is Theme.SECONDARY
    assert config.strict is True
    assert get_palette().theme is Theme.SECONDARY


def test_configure_color_level_sets_the_level() -> None:
    configure(color_level=1)
    assert get_color_level() is ColorLevel.BASIC


def test_configure_without_level_keeps_manual_level() -> None:
    set_color_level(2)
    configure(theme="secondary")
    assert get_color_level() is ColorLevel.ANSI256


def test_auto_detect_reruns_the_probe() -> None:
    set_color_level(3)
    use_probe(lambda: 1)
    set_color_level(3)

    configure(auto_detect=True)

    assert get_color_level() is ColorLevel.BASIC


def test_theme_change_invalidates_caches() -> None:
    re.red("warm")
    assert table_sizes()["formatters"] >= 1

    configure(theme="secondary")

    assert all(size == 0 for size in table_sizes().values())


def test_configure_validates_values() -> None:
    with pytest.raises(ValueError, match="theme"):
        configure(theme="dark")
    with pytest.raises(ValueError, match="color_level"):
        configure(color_level=7)
    with pytest.raises(TypeError, match="sparkles"):
        configure(sparkles=True)
    assert get_config().theme is Theme.PRIMARY


def test_restricted_custom_keys_are_dropped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="relico.lib.config.settings"):
        configure(custom_colors={"bold": "#ff0000"})

    assert "bold" not in get_config().custom_colors
    assert re.bold("x") == "\x1b[1mx\x1b[0m"


def test_init_user_config_prefers_programmatic_overrides(tmp_path: Path) -> None:
    (tmp_path / "relico.toml").write_text('theme = "secondary"\ncolor_level = 1\n', encoding="utf-8")

    config = init_user_config(tmp_path, {"color_level": 2})

    assert config.theme is Theme.SECONDARY
    assert config.color_level is ColorLevel.ANSI256
    assert get_color_level() is ColorLevel.ANSI256


def test_init_user_config_can_prefer_file_settings(tmp_path: Path) -> None:
    (tmp_path / "relico.toml").write_text("color_level = 1\n", encoding="utf-8")

    config = init_user_config(
        tmp_path,
        {"color_level": 2, "strict": True},
        user_settings_precedence=True,
    )

    assert config.color_level is ColorLevel.BASIC
    assert config.strict is True


def test_init_user_config_reads_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELICO_COLOR_LEVEL", "0")

    init_user_config(tmp_path)

    assert get_color_level() is ColorLevel.OFF
    assert re.red("x") == "x"
