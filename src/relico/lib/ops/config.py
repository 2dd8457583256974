"""Config inspection operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from relico.lib.config.settings import CONFIG_FILENAME, PYPROJECT_FILENAME, RelicoConfig, load_config
from relico.lib.ops.registry import OperationSpec, operation

if TYPE_CHECKING:
    from relico.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    root: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    root: str
    source: str | None
    config: RelicoConfig

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        values = self.config.to_dict()
        level = values["color_level"]
        lines = [
            f"source: {self.source or '(defaults)'}",
            f"color_level = {'auto' if level is None else level}",
            f"theme = {values['theme']}",
            f"auto_detect = {str(self.config.auto_detect).lower()}",
            f"strict = {str(self.config.strict).lower()}",
        ]
        for name, (primary, secondary) in sorted(self.config.custom_colors.items()):
            lines.append(f"custom_colors.{name} = [{primary}, {secondary}]")
        return "\n".join(lines)


def _source_path(root: Path) -> str | None:
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate.as_posix()
    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file() and "[tool.relico]" in pyproject.read_text(encoding="utf-8"):
        return pyproject.as_posix()
    return None


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    root = Path.cwd() if payload.root is None else Path(payload.root).expanduser().resolve()
    return ConfigShowOutput(
        root=root.as_posix(),
        source=_source_path(root),
        config=load_config(root),
    )


operation(
    OperationSpec(
        name="config.show",
        handler=config_show_sync,
        input_type=ConfigShowInput,
        output_type=ConfigShowOutput,
        cli_group="config",
        cli_name="show",
        description="Show config resolved from relico.toml, pyproject.toml and env.",
    )
)
