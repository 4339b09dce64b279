"""Colour codec: Color <-> canonical '#RRGGBB' text.

encode() always emits 6 uppercase hex digits with a leading '#'.
decode() accepts '#RRGGBB', 'RRGGBB', '#RGB' or 'RGB' (any case) and
raises MalformedHex for anything else. It never clamps: two hex digits
can only hold 0-255.

parse_color() is the wider boundary used for user input. On top of hex it
reads CSS 'rgb(r, g, b)' / 'rgba(r, g, b, a)' strings, clamping channels.
"""

import math
import re
from collections.abc import Sequence

from swatchkit.core.errors import MalformedHex
from swatchkit.core.types import Color

_HEX_RE = re.compile(r'#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})')
_CSS_RGB_RE = re.compile(
    r'rgba?\s*\(\s*(\d{1,3}(?:\.\d+)?)\s*,\s*(\d{1,3}(?:\.\d+)?)\s*,\s*(\d{1,3}(?:\.\d+)?)\s*(?:,\s*[\d.]+%?\s*)?\)',
    re.IGNORECASE,
)


def clamp(value, low, high):
    """Bound value to [low, high]."""
    return max(low, min(high, value))


def _channel(value: float) -> int:
    # round half up, then clamp
    return clamp(math.floor(float(value) + 0.5), 0, 255)


def encode(color: Color | Sequence[float]) -> str:
    """Format a colour (or fractional r, g, b triple) as '#RRGGBB'."""
    if isinstance(color, Color):
        r, g, b = color.as_tuple()
    else:
        r, g, b = (_channel(v) for v in color)
    return f'#{r:02X}{g:02X}{b:02X}'


def decode(text: str) -> Color:
    """Parse 3- or 6-digit hex text into a Color."""
    if not isinstance(text, str):
        raise MalformedHex(text)
    m = _HEX_RE.fullmatch(text)
    if not m:
        raise MalformedHex(text)
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def normalize(text: str) -> str:
    """Canonical '#RRGGBB' form of any accepted hex text."""
    return encode(decode(text))


def parse_color(text: str) -> Color:
    """Parse user-supplied colour text: hex (3/6 digits) or CSS rgb()/rgba()."""
    if not isinstance(text, str):
        raise MalformedHex(text)
    s = text.strip()
    m = _CSS_RGB_RE.fullmatch(s)
    if m:
        return Color(*(_channel(v) for v in m.groups()))
    return decode(s)
