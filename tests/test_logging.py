"""Library logging goes through stdlib loggers and stays quiet by default."""

from __future__ import annotations

import logging

import pytest

from relico.lib.level import set_color_level
from relico.lib.logging import get_logger


def test_get_logger_renders_key_values(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("relico.tests.sample")

    with caplog.at_level(logging.DEBUG, logger="relico.tests.sample"):
        logger.debug("sample event", level=2)

    assert "event='sample event'" in caplog.text
    assert "level=2" in caplog.text


def test_level_changes_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="relico.lib.level"):
        set_color_level(1)

    assert "color level changed" in caplog.text


def test_library_is_silent_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    set_color_level(2)
    set_color_level(1)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
