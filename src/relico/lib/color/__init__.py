"""Color model: representations, conversions, names and contrast."""

from relico.lib.color.contrast import (
    ContrastReport,
    check_contrast,
    contrast_ratio,
    get_accessible_color,
    relative_luminance,
)
from relico.lib.color.convert import (
    BASIC8,
    BLACK,
    WHITE,
    Hsl,
    Rgb,
    ansi256_to_rgb,
    blend_rgb,
    hsl_to_rgb,
    mix_with_white,
    nearest_basic_index,
    normalize,
    parse_hex,
    rgb_to_ansi256,
    rgb_to_hex,
    rgb_to_hsl,
)

__all__ = [
    "BASIC8",
    "BLACK",
    "WHITE",
    "ContrastReport",
    "Hsl",
    "Rgb",
    "ansi256_to_rgb",
    "blend_rgb",
    "check_contrast",
    "contrast_ratio",
    "get_accessible_color",
    "hsl_to_rgb",
    "mix_with_white",
    "nearest_basic_index",
    "normalize",
    "parse_hex",
    "relative_luminance",
    "rgb_to_ansi256",
    "rgb_to_hex",
    "rgb_to_hsl",
]
