# Color core: conversions, naming, value type

from .convert import (
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hex_to_rgb,
    parse_rgb_string,
    parse_color_string,
    format_rgb,
    format_hsl,
)
from .naming import color_name, hue_family, HUE_NAMES
from .schema import Color

__all__ = [
    "hsl_to_hex",
    "hsl_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hex_to_rgb",
    "parse_rgb_string",
    "parse_color_string",
    "format_rgb",
    "format_hsl",
    "color_name",
    "hue_family",
    "HUE_NAMES",
    "Color",
]
