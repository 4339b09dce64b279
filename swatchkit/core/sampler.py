"""Reduce a decoded image to a bounded, evenly spread set of opaque pixels.

A grid scan, not random sampling: with total = width * height,

    step = max(1, ceil(sqrt(total / max_samples)))

and every step-th column of every step-th row is visited, row by row from
the top-left. Pixels whose alpha is exactly 0 are skipped; alpha is dropped
from the rest. The result is reproducible for a given image and max_samples.

If the image layer fails while pixels are being read, sample() logs a
warning and returns an empty list instead of raising. Callers treat an empty
result as "could not sample".
"""

import logging
import math

import numpy as np
from PIL import Image

from swatchkit.core.config import DEFAULT_MAX_SAMPLES
from swatchkit.core.types import Color, PixelSet, PixelSource

logger = logging.getLogger(__name__)

# Errors the image layer may raise mid-read (truncated files, closed images, odd buffers).
_ACCESS_ERRORS = (OSError, ValueError, TypeError, AttributeError, IndexError)


def grid_step(total: int, max_samples: int) -> int:
    """Stride between sampled rows and columns."""
    if max_samples < 1:
        raise ValueError(f'max_samples must be >= 1, got {max_samples}')
    if total <= 0:
        return 1
    return max(1, math.ceil(math.sqrt(total / max_samples)))


def _rgba_array(image) -> np.ndarray | None:
    """HxWx4 uint8 view of PIL images and numpy buffers; None for other sources."""
    if isinstance(image, Image.Image):
        return np.asarray(image.convert('RGBA'))
    if isinstance(image, np.ndarray):
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValueError(f'Expected an HxWx3 or HxWx4 array, got shape {image.shape}')
        if image.shape[2] == 3:
            alpha = np.full(image.shape[:2] + (1,), 255, dtype=image.dtype)
            image = np.concatenate([image, alpha], axis=2)
        return image
    return None


def _sample_array(rgba: np.ndarray, step: int) -> PixelSet:
    grid = rgba[::step, ::step].reshape(-1, 4)
    opaque = grid[grid[:, 3] != 0, :3]
    return [Color(int(r), int(g), int(b)) for r, g, b in opaque.tolist()]


def _sample_source(source: PixelSource, width: int, height: int, step: int) -> PixelSet:
    pixels: PixelSet = []
    for y in range(0, height, step):
        for x in range(0, width, step):
            value = tuple(source.getpixel((x, y)))
            alpha = value[3] if len(value) > 3 else 255
            if alpha == 0:
                continue
            pixels.append(Color(int(value[0]), int(value[1]), int(value[2])))
    return pixels


def sample(image: Image.Image | np.ndarray | PixelSource, max_samples: int = DEFAULT_MAX_SAMPLES) -> PixelSet:
    """Grid-sample the opaque pixels of image, keeping roughly max_samples of them."""
    if max_samples < 1:
        raise ValueError(f'max_samples must be >= 1, got {max_samples}')
    try:
        rgba = _rgba_array(image)
        if rgba is not None:
            height, width = rgba.shape[:2]
        else:
            width, height = int(image.width), int(image.height)
        step = grid_step(width * height, max_samples)
        if width <= 0 or height <= 0:
            return []
        if rgba is not None:
            pixels = _sample_array(rgba, step)
        else:
            pixels = _sample_source(image, width, height, step)
    except _ACCESS_ERRORS as exc:
        logger.warning('could not read pixels from image: %s', exc)
        return []

    logger.debug('sampled %d pixels from %dx%d image (step=%d)', len(pixels), width, height, step)
    return pixels


def is_sample_failure(pixels: PixelSet) -> bool:
    """An empty sample set means the image could not be sampled."""
    return len(pixels) == 0
