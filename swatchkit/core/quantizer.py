"""k-means colour quantization over a sampled pixel set.

Initialisation draws uniformly random pixels and keeps one as a new centre
only if no existing centre has the same exact (r, g, b). Draws are bounded
(DRAWS_PER_PIXEL * len(pixels) + k); when they run out the remaining distinct
colours are taken in input order, and only if the input has fewer than k
distinct colours are duplicate centres allowed.

Each of the `iterations` rounds assigns every pixel to the centre with the
smallest squared Euclidean RGB distance (lowest centre index wins ties) and
moves each non-empty cluster's centre to the float mean of its pixels. An
empty cluster keeps its previous centre. There is no convergence check.

A last assignment pass counts pixels per centre. The k centres are rounded
to ints and returned sorted by descending count; equal counts keep centre
order.

Initialisation is random, so results can differ between calls. Pass `seed`
for reproducible output.
"""

import logging
from collections.abc import Sequence

import numpy as np

from swatchkit.core.codec import clamp
from swatchkit.core.config import DEFAULT_ITERATIONS, MAX_COLORS, MIN_COLORS
from swatchkit.core.types import Color, PaletteEntry

logger = logging.getLogger(__name__)

DRAWS_PER_PIXEL = 4


def _as_array(pixels: Sequence[Color] | Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
    """Nx3 float64 array of channel values."""
    if isinstance(pixels, np.ndarray):
        arr = pixels.astype(np.float64)
    else:
        arr = np.array([p.as_tuple() if isinstance(p, Color) else tuple(p) for p in pixels], dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f'Expected N x 3 pixel data, got shape {arr.shape}')
    return arr


def _init_centres(data: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    n = len(data)
    centres: list[tuple[float, float, float]] = []
    seen: set[tuple[float, float, float]] = set()
    max_draws = DRAWS_PER_PIXEL * n + k
    draws = 0
    while len(centres) < k and draws < max_draws:
        candidate = tuple(data[int(rng.integers(n))])
        draws += 1
        if candidate not in seen:
            seen.add(candidate)
            centres.append(candidate)

    if len(centres) < k:
        for row in data:
            candidate = tuple(row)
            if candidate not in seen:
                seen.add(candidate)
                centres.append(candidate)
                if len(centres) == k:
                    break

    if len(centres) < k:
        logger.warning(
            'only %d distinct colours for k=%d; filling with duplicate centres',
            len(centres),
            k,
        )
        while len(centres) < k:
            centres.append(tuple(data[int(rng.integers(n))]))

    return np.array(centres, dtype=np.float64)


def assign(data: np.ndarray, centres: np.ndarray) -> np.ndarray:
    """Index of the nearest centre for each pixel (first index wins ties)."""
    diff = data[:, None, :] - centres[None, :, :]
    distances = (diff * diff).sum(axis=2)
    # argmin returns the first occurrence of the minimum
    return distances.argmin(axis=1)


def _update(data: np.ndarray, labels: np.ndarray, centres: np.ndarray) -> np.ndarray:
    k = len(centres)
    counts = np.bincount(labels, minlength=k)
    sums = np.zeros((k, 3), dtype=np.float64)
    np.add.at(sums, labels, data)
    updated = centres.copy()
    filled = counts > 0
    updated[filled] = sums[filled] / counts[filled, None]
    return updated


def rank(entries: Sequence[PaletteEntry]) -> list[PaletteEntry]:
    """Sort by descending count; ties keep their input order."""
    return sorted(entries, key=lambda e: -e.count)


def quantize(
    pixels: Sequence[Color] | Sequence[Sequence[int]] | np.ndarray,
    k: int,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int | None = None,
) -> list[PaletteEntry]:
    """Cluster pixels into k dominant colours, most common first.

    k is clamped to [1, 16]. Empty input returns []. iterations must be >= 1.
    """
    if iterations < 1:
        raise ValueError(f'iterations must be >= 1, got {iterations}')
    data = _as_array(pixels)
    if len(data) == 0:
        return []

    k = int(clamp(int(k), MIN_COLORS, MAX_COLORS))
    logger.debug('quantizing %d pixels into k=%d over %d iterations', len(data), k, iterations)

    rng = np.random.default_rng(seed)
    centres = _init_centres(data, k, rng)
    for _ in range(iterations):
        labels = assign(data, centres)
        centres = _update(data, labels, centres)

    counts = np.bincount(assign(data, centres), minlength=k)
    entries = [PaletteEntry(color=Color.from_sequence(centre), count=int(count)) for centre, count in zip(centres, counts)]
    return rank(entries)
