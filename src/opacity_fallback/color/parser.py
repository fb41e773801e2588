"""Parse CSS color literals into :class:`Color` triplets.

Supported notations:
    #rgb, #rgba, #rrggbb, #rrggbbaa
    rgb(255, 0, 0) / rgba(255, 0, 0, .2) / rgb(255 0 0 / .2)
    hsl(210, 50%, 40%) / hsla(210, 50%, 40%, .2) / hsl(210 50% 40% / .2)

Everything else (named colors, oklch(), lab(), color(display-p3 ...)) is
reported as unparseable by returning ``None``.  Malformed input is an
expected case and never raises.
"""

from __future__ import annotations

import math
import re

from opacity_fallback.color.model import Color

__all__ = [
    "numeric_tokens",
    "parse_hex_color",
    "parse_rgb_function",
    "parse_hsl_function",
    "hsl_to_rgb",
    "parse_color",
    "parse_loose_rgb",
    "parse_color_lenient",
]

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")
_NUMBER_RE = re.compile(r"-?\d*\.?\d+")
_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_RGB_PREFIX_RE = re.compile(r"rgba?\(", re.IGNORECASE)
_HSL_PREFIX_RE = re.compile(r"hsla?\(", re.IGNORECASE)
_HSL_RE = re.compile(r"hsla?\(\s*(.+?)\s*\)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Tokenizing helpers
# ---------------------------------------------------------------------------


def numeric_tokens(text: str) -> list[str]:
    """Return every numeric token in *text*, in source order.

    A token is an optional minus sign followed by digits with at most one
    decimal point (``12``, ``-3``, ``.5``, ``40.25``).  Units and percent
    signs are not part of the token.
    """
    return _NUMBER_RE.findall(text)


def _leading_float(text: str) -> float | None:
    """Parse the numeric prefix of *text* (``"120deg"`` -> 120.0)."""
    match = _LEADING_NUMBER_RE.match(text)
    if not match:
        return None
    return float(match.group(1))


def _paren_contents(value: str) -> str | None:
    """Return the text between the first ``(`` and the last ``)``."""
    left = value.find("(")
    right = value.rfind(")")
    if left < 0 or right < 0 or right <= left:
        return None
    return value[left + 1 : right]


def _first_three_channels(inner: str) -> Color | None:
    nums = numeric_tokens(inner)
    if len(nums) < 3:
        return None
    r, g, b = (float(n) for n in nums[:3])
    if any(math.isnan(c) for c in (r, g, b)):
        return None
    return Color.from_floats(r, g, b)


# ---------------------------------------------------------------------------
# Individual grammars
# ---------------------------------------------------------------------------


def parse_hex_color(value: str) -> Color | None:
    """Parse a 3, 4, 6 or 8 digit hex color, with or without the leading ``#``.

    Short forms are expanded by doubling each digit.  Any alpha digits are
    dropped.
    """
    digits = value.replace("#", "", 1).strip()
    if len(digits) not in (3, 4, 6, 8):
        return None
    if not _HEX_DIGITS_RE.fullmatch(digits):
        return None
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits[:3])
    else:
        digits = digits[:6]
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_rgb_function(value: str) -> Color | None:
    """Parse ``rgb()`` / ``rgba()`` by taking the first three numbers inside."""
    v = value.strip()
    if not _RGB_PREFIX_RE.match(v):
        return None
    inner = _paren_contents(v)
    if inner is None:
        return None
    return _first_three_channels(inner)


def hsl_to_rgb(h: float, s: float, l: float) -> Color | None:
    """Convert hue in degrees and saturation/lightness in 0..1 to a Color.

    Returns None when any component is infinite or NaN, since the hue
    sector cannot be determined.
    """
    if not all(math.isfinite(v) for v in (h, s, l)):
        return None
    c = (1 - abs(2 * l - 1)) * s
    hh = ((h % 360) + 360) % 360
    x = c * (1 - abs(((hh / 60) % 2) - 1))
    m = l - c / 2
    if hh < 60:
        r1, g1, b1 = c, x, 0.0
    elif hh < 120:
        r1, g1, b1 = x, c, 0.0
    elif hh < 180:
        r1, g1, b1 = 0.0, c, x
    elif hh < 240:
        r1, g1, b1 = 0.0, x, c
    elif hh < 300:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x
    return Color.from_floats((r1 + m) * 255, (g1 + m) * 255, (b1 + m) * 255)


def parse_hsl_function(value: str) -> Color | None:
    """Parse ``hsl()`` / ``hsla()`` in comma or space separated syntax."""
    match = _HSL_RE.fullmatch(value)
    if not match:
        return None
    left = match.group(1).strip().split("/")[0].strip()
    if "," in left:
        parts = [p.strip() for p in left.split(",")]
    else:
        parts = [p.strip() for p in re.split(r"\s+", left)]
    if len(parts) < 3:
        return None

    h = _leading_float(parts[0])
    s = _leading_float(parts[1].replace("%", "", 1))
    l = _leading_float(parts[2].replace("%", "", 1))
    if h is None or s is None or l is None:
        return None
    s = max(0.0, min(1.0, s / 100))
    l = max(0.0, min(1.0, l / 100))
    return hsl_to_rgb(h, s, l)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def parse_color(value: str) -> Color | None:
    """Parse a color literal, dispatching on a cheap syntactic sniff."""
    v = value.strip()
    if not v or v == "transparent":
        return None
    if v.startswith("#"):
        return parse_hex_color(v)
    if _RGB_PREFIX_RE.match(v):
        return parse_rgb_function(v)
    if _HSL_PREFIX_RE.match(v):
        return parse_hsl_function(v)
    return None


def parse_loose_rgb(value: str) -> Color | None:
    """Pull three channels out of any value that mentions ``rgb(``/``rgba(``.

    Unlike :func:`parse_rgb_function` the function name may appear anywhere,
    e.g. inside a ``var()`` fallback.
    """
    v = value.strip()
    if not _RGB_PREFIX_RE.search(v):
        return None
    inner = _paren_contents(v)
    if inner is None:
        return None
    return _first_three_channels(inner)


def parse_color_lenient(value: str) -> Color | None:
    """Try :func:`parse_color`, then fall back to :func:`parse_loose_rgb`."""
    return parse_color(value) or parse_loose_rgb(value)
