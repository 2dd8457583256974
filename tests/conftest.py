"""Shared pytest fixtures: isolated relico state and a CLI runner."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from relico.lib.config import reset_config
from relico.lib.detect import detect_color_level
from relico.lib.level import use_probe
from relico.lib.types import ColorLevel

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

_RELICO_ENV = ("RELICO_COLOR_LEVEL", "RELICO_THEME", "RELICO_STRICT")
_COLOR_ENV = ("NO_COLOR", "FORCE_COLOR", "COLORTERM")


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def isolated_relico_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _RELICO_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    use_probe(lambda: ColorLevel.TRUECOLOR)
    yield
    reset_config()
    use_probe(detect_color_level)


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = os.environ.copy()
    for name in (*_RELICO_ENV, *_COLOR_ENV):
        env.pop(name, None)
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}{os.pathsep}{existing}"
    return env


@pytest.fixture
def run_relico(tmp_path: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(args: list[str], timeout: float = 15.0, cwd: Path | None = None) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "relico", *args],
            cwd=tmp_path if cwd is None else cwd,
            env=cli_env,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
