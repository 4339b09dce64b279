"""Tests for swatchkit.core.quantizer — k-means palette extraction.

Initial centres are random, so these tests either pass a seed or use
inputs whose result does not depend on which centres are drawn first.
"""

import logging

import numpy as np
import pytest
from swatchkit.core.quantizer import _update, assign, quantize, rank
from swatchkit.core.types import Color, PaletteEntry

RED = Color(250, 10, 10)
BLUE = Color(10, 10, 250)
GREEN = Color(10, 250, 10)


def _noisy(rng, centre, n, spread=8):
    arr = np.clip(rng.normal(centre, spread, size=(n, 3)), 0, 255).round().astype(int)
    return [Color(*map(int, row)) for row in arr]


class TestQuantizeBasics:
    def test_empty_input(self):
        assert quantize([], 5) == []

    def test_empty_array(self):
        assert quantize(np.zeros((0, 3)), 5) == []

    def test_rejects_non_positive_iterations(self):
        with pytest.raises(ValueError):
            quantize([RED], 2, iterations=0)

    def test_k1_is_mean(self):
        pixels = [Color(0, 0, 0), Color(10, 20, 30), Color(20, 40, 61)]
        result = quantize(pixels, 1)
        assert len(result) == 1
        assert result[0].count == 3
        # mean (10, 20, 30.33) rounded
        assert result[0].color == Color(10, 20, 30)

    def test_k_clamped_low(self):
        result = quantize([RED, BLUE], 0, seed=1)
        assert len(result) == 1
        assert result[0].count == 2

    def test_k_clamped_high(self):
        pixels = [Color(i * 10, 255 - i * 10, (i * 37) % 256) for i in range(25)]
        result = quantize(pixels, 40, seed=3)
        assert len(result) == 16
        assert sum(e.count for e in result) == 25

    def test_two_exact_colours(self):
        pixels = [RED] * 60 + [BLUE] * 30
        result = quantize(pixels, 2)
        assert result == [PaletteEntry(RED, 60), PaletteEntry(BLUE, 30)]

    def test_three_exact_colours_ranked(self):
        pixels = [GREEN] * 10 + [RED] * 50 + [BLUE] * 200
        result = quantize(pixels, 3)
        assert [e.count for e in result] == [200, 50, 10]
        assert [e.color for e in result] == [BLUE, RED, GREEN]

    def test_accepts_tuples_and_arrays(self):
        tuples = [(250, 10, 10)] * 4 + [(10, 10, 250)] * 2
        assert quantize(tuples, 2) == quantize(np.array(tuples, dtype=np.uint8), 2)

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            quantize(np.zeros((4, 4)), 2)


class TestQuantizeClusters:
    def test_noisy_clusters_ranked_and_bounded(self):
        rng = np.random.default_rng(7)
        pixels = _noisy(rng, (200, 40, 40), 300) + _noisy(rng, (40, 40, 200), 150) + _noisy(rng, (40, 200, 40), 50)
        result = quantize(pixels, 3, iterations=9, seed=11)
        counts = [e.count for e in result]
        assert counts == sorted(counts, reverse=True)
        assert sum(counts) == 500
        arr = np.array([p.as_tuple() for p in pixels])
        lo, hi = arr.min(axis=0), arr.max(axis=0)
        for e in result:
            c = np.array(e.color.as_tuple())
            assert (c >= lo).all() and (c <= hi).all()

    def test_seed_is_reproducible(self):
        rng = np.random.default_rng(0)
        pixels = [Color(*map(int, row)) for row in rng.integers(0, 256, size=(400, 3))]
        assert quantize(pixels, 6, seed=42) == quantize(pixels, 6, seed=42)

    def test_counts_sum_to_input(self):
        rng = np.random.default_rng(1)
        pixels = [Color(*map(int, row)) for row in rng.integers(0, 256, size=(321, 3))]
        result = quantize(pixels, 8, seed=5)
        assert len(result) == 8
        assert sum(e.count for e in result) == 321


class TestDegenerateInput:
    def test_fewer_distinct_colours_than_k(self, caplog):
        pixels = [RED] * 5 + [BLUE] * 3
        with caplog.at_level(logging.WARNING, logger='swatchkit.core.quantizer'):
            result = quantize(pixels, 4, seed=2)
        assert len(result) == 4
        assert result[0] == PaletteEntry(RED, 5)
        assert result[1] == PaletteEntry(BLUE, 3)
        assert [e.count for e in result[2:]] == [0, 0]
        assert 'duplicate centres' in caplog.text

    def test_single_colour(self):
        result = quantize([GREEN] * 12, 3, seed=9)
        assert len(result) == 3
        assert result[0] == PaletteEntry(GREEN, 12)
        assert all(e.color == GREEN and e.count == 0 for e in result[1:])

    def test_rare_colour_still_becomes_a_centre(self):
        pixels = [Color(0, 0, 0)] * 1000 + [Color(255, 255, 255)]
        for seed in range(5):
            result = quantize(pixels, 2, seed=seed)
            assert result == [PaletteEntry(Color(0, 0, 0), 1000), PaletteEntry(Color(255, 255, 255), 1)]


class TestAssign:
    def test_nearest(self):
        data = np.array([[0, 0, 0], [250, 250, 250]], dtype=np.float64)
        centres = np.array([[255, 255, 255], [1, 1, 1]], dtype=np.float64)
        assert assign(data, centres).tolist() == [1, 0]

    def test_tie_goes_to_lower_index(self):
        data = np.array([[10, 10, 10]], dtype=np.float64)
        centres = np.array([[0, 10, 10], [20, 10, 10]], dtype=np.float64)
        assert assign(data, centres).tolist() == [0]
        assert assign(data, centres[::-1].copy()).tolist() == [0]


class TestUpdate:
    def test_mean_is_not_rounded(self):
        data = np.array([[0, 0, 0], [1, 1, 2]], dtype=np.float64)
        centres = np.array([[5, 5, 5]], dtype=np.float64)
        updated = _update(data, np.array([0, 0]), centres)
        assert updated.tolist() == [[0.5, 0.5, 1.0]]

    def test_empty_cluster_keeps_centre(self):
        data = np.array([[0, 0, 0], [2, 2, 2]], dtype=np.float64)
        centres = np.array([[1, 1, 1], [200, 100, 50]], dtype=np.float64)
        updated = _update(data, np.array([0, 0]), centres)
        assert updated.tolist() == [[1.0, 1.0, 1.0], [200.0, 100.0, 50.0]]


class TestRank:
    def test_descending(self):
        entries = [PaletteEntry(RED, 50), PaletteEntry(GREEN, 200), PaletteEntry(BLUE, 10)]
        assert [e.count for e in rank(entries)] == [200, 50, 10]

    def test_ties_keep_order(self):
        entries = [PaletteEntry(RED, 5), PaletteEntry(GREEN, 9), PaletteEntry(BLUE, 5)]
        assert [e.color for e in rank(entries)] == [GREEN, RED, BLUE]
