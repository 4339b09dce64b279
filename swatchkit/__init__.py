"""swatchkit — dominant-colour palette extraction and WCAG contrast."""

from swatchkit.core.codec import clamp, decode, encode, parse_color
from swatchkit.core.errors import InvalidColorInput, MalformedHex, SwatchError
from swatchkit.core.luminance import check_contrast, contrast_ratio, relative_luminance, wcag_badges
from swatchkit.core.quantizer import quantize
from swatchkit.core.sampler import sample
from swatchkit.core.types import Badge, Color, ContrastResult, PaletteEntry

__version__ = '0.1.0'

__all__ = [
    'Badge',
    'Color',
    'ContrastResult',
    'InvalidColorInput',
    'MalformedHex',
    'PaletteEntry',
    'SwatchError',
    'check_contrast',
    'clamp',
    'contrast_ratio',
    'decode',
    'encode',
    'parse_color',
    'quantize',
    'relative_luminance',
    'sample',
    'wcag_badges',
]
