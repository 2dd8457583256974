"""Runtime configuration: file/env loading and the active palette."""

from relico.lib.config.runtime import (
    configure,
    get_config,
    get_palette,
    init_user_config,
    is_strict,
    reset_config,
)
from relico.lib.config.settings import RelicoConfig, load_config, load_settings

__all__ = [
    "RelicoConfig",
    "configure",
    "get_config",
    "get_palette",
    "init_user_config",
    "is_strict",
    "load_config",
    "load_settings",
    "reset_config",
]
