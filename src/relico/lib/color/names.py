"""Static name tables: styles, the themed base palette and web colors."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

STYLE_CODES: Final = MappingProxyType(
    {
        "reset": 0,
        "bold": 1,
        "dim": 2,
        "italic": 3,
        "underline": 4,
        "inverse": 7,
        "hidden": 8,
        "strikethrough": 9,
    }
)

# Style keys may never be redefined through custom colors.
RESTRICTED_KEYS: Final = frozenset(STYLE_CODES)

# Lowercased public Formatter members; attribute access never reaches a
# custom color with one of these names.
FORMATTER_ATTRIBUTES: Final = frozenset(
    {
        "ops",
        "extend",
        "style",
        "rgb",
        "bg_rgb",
        "bgrgb",
        "hex",
        "bg_hex",
        "bghex",
        "hsl",
        "bg_hsl",
        "bghsl",
        "color",
        "bg_color",
        "bgcolor",
        "ansi256",
        "bg_ansi256",
        "bgansi256",
    }
)

# name -> (primary theme, secondary theme)
BASE_COLORS: Final = MappingProxyType(
    {
        "black": ("#000000", "#000000"),
        "red": ("#ff0000", "#ff5555"),
        "green": ("#00ff00", "#50fa7b"),
        "yellow": ("#ffff00", "#f1fa8c"),
        "blue": ("#0000ff", "#5f87ff"),
        "magenta": ("#ff00ff", "#ff79c6"),
        "cyan": ("#00ffff", "#8be9fd"),
        "white": ("#ffffff", "#ffffff"),
        "gray": ("#808080", "#808080"),
        "orange": ("#ffa500", "#ff8c00"),
        "pink": ("#ffc0cb", "#ffb6c1"),
        "purple": ("#800080", "#9370db"),
        "teal": ("#008080", "#20b2aa"),
        "lime": ("#00ff00", "#32cd32"),
        "brown": ("#a52a2a", "#8b4513"),
        "navy": ("#000080", "#191970"),
        "maroon": ("#800000", "#8b0000"),
        "olive": ("#808000", "#6b8e23"),
        "silver": ("#c0c0c0", "#a9a9a9"),
    }
)

WEB_COLORS: Final = MappingProxyType(
    {
        "aliceblue": "#f0f8ff",
        "antiquewhite": "#faebd7",
        "aqua": "#00ffff",
        "aquamarine": "#7fffd4",
        "azure": "#f0ffff",
        "beige": "#f5f5dc",
        "bisque": "#ffe4c4",
        "blanchedalmond": "#ffebcd",
        "burlywood": "#deb887",
        "cadetblue": "#5f9ea0",
        "chocolate": "#d2691e",
        "coral": "#ff7f50",
        "cornflowerblue": "#6495ed",
        "crimson": "#dc143c",
        "darkblue": "#00008b",
        "darkcyan": "#008b8b",
        "darkgoldenrod": "#b8860b",
        "darkgray": "#a9a9a9",
        "darkgreen": "#006400",
        "darkkhaki": "#bdb76b",
        "darkmagenta": "#8b008b",
        "darkolivegreen": "#556b2f",
        "darkorange": "#ff8c00",
        "darkorchid": "#9932cc",
        "darkred": "#8b0000",
        "darksalmon": "#e9967a",
        "darkseagreen": "#8fbc8f",
        "darkslateblue": "#483d8b",
        "darkslategray": "#2f4f4f",
        "darkturquoise": "#00ced1",
        "darkviolet": "#9400d3",
        "deeppink": "#ff1493",
        "deepskyblue": "#00bfff",
        "dodgerblue": "#1e90ff",
        "firebrick": "#b22222",
        "floralwhite": "#fffaf0",
        "forestgreen": "#228b22",
        "fuchsia": "#ff00ff",
        "gainsboro": "#dcdcdc",
        "ghostwhite": "#f8f8ff",
        "gold": "#ffd700",
        "goldenrod": "#daa520",
        "greenyellow": "#adff2f",
        "honeydew": "#f0fff0",
        "hotpink": "#ff69b4",
        "indianred": "#cd5c5c",
        "indigo": "#4b0082",
        "ivory": "#fffff0",
        "khaki": "#f0e68c",
        "lavender": "#e6e6fa",
        "lavenderblush": "#fff0f5",
        "lawngreen": "#7cfc00",
        "lemonchiffon": "#fffacd",
        "lightblue": "#add8e6",
        "lightcoral": "#f08080",
        "lightcyan": "#e0ffff",
        "lightgoldenrodyellow": "#fafad2",
        "lightgray": "#d3d3d3",
        "lightgreen": "#90ee90",
        "lightpink": "#ffb6c1",
        "lightsalmon": "#ffa07a",
        "lightseagreen": "#20b2aa",
        "lightskyblue": "#87cefa",
        "lightslategray": "#778899",
        "lightsteelblue": "#b0c4de",
        "lightyellow": "#ffffe0",
        "linen": "#faf0e6",
        "mediumaquamarine": "#66cdaa",
        "mediumblue": "#0000cd",
        "mediumorchid": "#ba55d3",
        "mediumpurple": "#9370db",
        "mediumseagreen": "#3cb371",
        "mediumslateblue": "#7b68ee",
        "mediumspringgreen": "#00fa9a",
        "mediumturquoise": "#48d1cc",
        "mediumvioletred": "#c71585",
        "midnightblue": "#191970",
        "mintcream": "#f5fffa",
        "mistyrose": "#ffe4e1",
        "moccasin": "#ffe4b5",
        "navajowhite": "#ffdead",
        "oldlace": "#fdf5e6",
        "olivedrab": "#6b8e23",
        "orangered": "#ff4500",
        "orchid": "#da70d6",
        "palegoldenrod": "#eee8aa",
        "palegreen": "#98fb98",
        "paleturquoise": "#afeeee",
        "palevioletred": "#db7093",
        "papayawhip": "#ffefd5",
        "peachpuff": "#ffdab9",
        "peru": "#cd853f",
        "plum": "#dda0dd",
        "powderblue": "#b0e0e6",
        "rosybrown": "#bc8f8f",
        "royalblue": "#4169e1",
        "saddlebrown": "#8b4513",
        "salmon": "#fa8072",
        "sandybrown": "#f4a460",
        "seagreen": "#2e8b57",
        "seashell": "#fff5ee",
        "sienna": "#a0522d",
        "skyblue": "#87ceeb",
        "slateblue": "#6a5acd",
        "slategray": "#708090",
        "snow": "#fffafa",
        "springgreen": "#00ff7f",
        "steelblue": "#4682b4",
        "tan": "#d2b48c",
        "thistle": "#d8bfd8",
        "tomato": "#ff6347",
        "turquoise": "#40e0d0",
        "violet": "#ee82ee",
        "wheat": "#f5deb3",
        "whitesmoke": "#f5f5f5",
        "yellowgreen": "#9acd32",
    }
)

BRIGHT_MIX: Final = 0.25
PASTEL_MIX: Final = 0.60
GRAY_STEPS: Final = frozenset(range(10, 100, 10))

DEFAULT_NAMED_HEX: Final = MappingProxyType(
    {**WEB_COLORS, **{name: pair[0] for name, pair in BASE_COLORS.items()}}
)
