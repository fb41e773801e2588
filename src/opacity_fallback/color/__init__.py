"""Color layer: the Color triplet and CSS color literal parsers."""

from opacity_fallback.color.model import Color, clamp_byte, format_alpha
from opacity_fallback.color.parser import (
    hsl_to_rgb,
    numeric_tokens,
    parse_color,
    parse_color_lenient,
    parse_hex_color,
    parse_hsl_function,
    parse_loose_rgb,
    parse_rgb_function,
)

__all__ = [
    "Color",
    "clamp_byte",
    "format_alpha",
    "hsl_to_rgb",
    "numeric_tokens",
    "parse_color",
    "parse_color_lenient",
    "parse_hex_color",
    "parse_hsl_function",
    "parse_loose_rgb",
    "parse_rgb_function",
]
