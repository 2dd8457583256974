"""Terminal text styling with ANSI escape sequences.

    >>> from relico import re, chain, set_color_level
    >>> set_color_level(3)
    >>> re.bold.red("hi")
    '\\x1b[1m\\x1b[38;2;255;0;0mhi\\x1b[0m'
"""

from relico.lib.apply import apply_ops, strip_ansi
from relico.lib.color import (
    ContrastReport,
    Hsl,
    Rgb,
    contrast_ratio,
    hsl_to_rgb,
    normalize,
    relative_luminance,
    rgb_to_ansi256,
    rgb_to_hex,
    rgb_to_hsl,
)
from relico.lib.config import RelicoConfig, configure, get_config, init_user_config, load_config
from relico.lib.detect import ColorSupport, color_support, detect_color_level
from relico.lib.effects import (
    ColorScheme,
    auto_contrast,
    blend,
    check_contrast,
    color_wrap,
    colorize_json,
    create_color_scheme,
    get_accessible_color,
    gradient,
    highlight,
    link,
    multi_gradient,
    rainbow,
    safe_bg,
    safe_color,
)
from relico.lib.errors import (
    InvalidColorError,
    InvalidColorLevelError,
    RelicoError,
    UnknownStyleError,
)
from relico.lib.formatter import (
    Formatter,
    bg_hex,
    bg_hsl,
    bg_rgb,
    chain,
    hex,  # noqa: A004
    hsl,
    re,
    rgb,
)
from relico.lib.level import get_color_level, set_color_level
from relico.lib.types import ColorLevel, Layer, Theme

__version__ = "0.1.0"

__all__ = [
    "ColorLevel",
    "ColorScheme",
    "ColorSupport",
    "ContrastReport",
    "Formatter",
    "Hsl",
    "InvalidColorError",
    "InvalidColorLevelError",
    "Layer",
    "RelicoConfig",
    "RelicoError",
    "Rgb",
    "Theme",
    "UnknownStyleError",
    "__version__",
    "apply_ops",
    "auto_contrast",
    "bg_hex",
    "bg_hsl",
    "bg_rgb",
    "blend",
    "chain",
    "check_contrast",
    "color_support",
    "color_wrap",
    "colorize_json",
    "configure",
    "contrast_ratio",
    "create_color_scheme",
    "detect_color_level",
    "get_accessible_color",
    "get_color_level",
    "get_config",
    "gradient",
    "hex",
    "highlight",
    "hsl",
    "hsl_to_rgb",
    "init_user_config",
    "link",
    "load_config",
    "multi_gradient",
    "normalize",
    "rainbow",
    "re",
    "relative_luminance",
    "rgb",
    "rgb_to_ansi256",
    "rgb_to_hex",
    "rgb_to_hsl",
    "safe_bg",
    "safe_color",
    "set_color_level",
    "strip_ansi",
]
