"""WCAG 2.x relative luminance, contrast ratio and pass/fail badges.

Inputs may be Color objects, (r, g, b) tuples or colour text. Text goes
through codec.parse_color; anything that cannot be turned into a colour
raises InvalidColorInput. There is no silent fallback colour here.
"""

import math
import operator
from collections.abc import Sequence

from swatchkit.core import codec
from swatchkit.core.errors import InvalidColorInput, MalformedHex
from swatchkit.core.types import Badge, Color, ContrastResult

RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722

# label, minimum ratio (inclusive)
WCAG_THRESHOLDS: tuple[tuple[str, float], ...] = (
    ('AA normal', 4.5),
    ('AA large', 3.0),
    ('AAA normal', 7.0),
)

ColorInput = Color | str | Sequence[int]


def _to_color(value: ColorInput, which: str) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return codec.parse_color(value)
        except MalformedHex as exc:
            raise InvalidColorInput(which, value) from exc
    try:
        r, g, b = (operator.index(v) for v in value)
        return Color(r, g, b)
    except (TypeError, ValueError) as exc:
        raise InvalidColorInput(which, value) from exc


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorInput) -> float:
    """Relative luminance in [0, 1]."""
    c = _to_color(color, 'input')
    return RED_WEIGHT * _linearize(c.r) + GREEN_WEIGHT * _linearize(c.g) + BLUE_WEIGHT * _linearize(c.b)


def _round2(value: float) -> float:
    return math.floor(value * 100.0 + 0.5) / 100.0


def contrast_ratio(color_a: ColorInput, color_b: ColorInput) -> float:
    """(L_max + 0.05) / (L_min + 0.05), rounded to 2 decimals. Symmetric, in [1, 21]."""
    la = relative_luminance(_to_color(color_a, 'first'))
    lb = relative_luminance(_to_color(color_b, 'second'))
    lighter, darker = max(la, lb), min(la, lb)
    return _round2((lighter + 0.05) / (darker + 0.05))


def wcag_badges(ratio: float) -> list[Badge]:
    """Independent AA normal / AA large / AAA normal checks."""
    return [Badge(label=label, threshold=threshold, passed=ratio >= threshold) for label, threshold in WCAG_THRESHOLDS]


def badge_passes(badges: list[Badge], label: str) -> bool:
    for badge in badges:
        if badge.label == label:
            return badge.passed
    raise KeyError(f'Unknown badge: {label}. Available: {", ".join(b.label for b in badges)}')


def check_contrast(foreground: ColorInput, background: ColorInput) -> ContrastResult:
    """Decode both colours, compute the ratio and its badges."""
    fg = _to_color(foreground, 'foreground')
    bg = _to_color(background, 'background')
    ratio = contrast_ratio(fg, bg)
    return ContrastResult(foreground=fg, background=bg, ratio=ratio, badges=wcag_badges(ratio))
