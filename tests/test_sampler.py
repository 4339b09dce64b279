"""Tests for swatchkit.core.sampler — grid stride sampling of opaque pixels."""

import logging

import numpy as np
import pytest
from PIL import Image
from swatchkit.core.sampler import grid_step, is_sample_failure, sample
from swatchkit.core.types import Color


class FakeSource:
    """Minimal PixelSource: getpixel returns RGB or RGBA from a dict."""

    def __init__(self, width, height, pixels, default=(0, 0, 0, 255)):
        self.width = width
        self.height = height
        self.pixels = pixels
        self.default = default
        self.visited = []

    def getpixel(self, xy):
        self.visited.append(xy)
        return self.pixels.get(xy, self.default)


class BrokenSource:
    width = 10
    height = 10

    def getpixel(self, xy):
        raise OSError('image file is truncated')


class TestGridStep:
    def test_100x100_at_2000(self):
        # ceil(sqrt(10000 / 2000)) = ceil(2.236) = 3
        assert grid_step(10000, 2000) == 3

    def test_exact_square(self):
        assert grid_step(10000, 100) == 10

    def test_more_samples_than_pixels(self):
        assert grid_step(50, 2500) == 1

    def test_empty_image(self):
        assert grid_step(0, 2500) == 1

    def test_invalid_max_samples(self):
        with pytest.raises(ValueError):
            grid_step(100, 0)


class TestSamplePilImage:
    def test_100x100_opaque(self):
        img = Image.new('RGB', (100, 100), (10, 20, 30))
        pixels = sample(img, 2000)
        assert len(pixels) == 34 * 34 == 1156
        assert all(p == Color(10, 20, 30) for p in pixels)

    def test_default_max_samples(self):
        img = Image.new('RGB', (200, 100), (1, 2, 3))
        # ceil(sqrt(20000 / 2500)) = ceil(2.83) = 3 -> 67 x 34 grid
        assert len(sample(img)) == 67 * 34

    def test_every_pixel_when_small(self):
        img = Image.new('RGB', (7, 5), (255, 0, 0))
        assert len(sample(img, 2500)) == 35

    def test_row_major_order(self):
        img = Image.new('RGB', (2, 2))
        img.putpixel((0, 0), (1, 1, 1))
        img.putpixel((1, 0), (2, 2, 2))
        img.putpixel((0, 1), (3, 3, 3))
        img.putpixel((1, 1), (4, 4, 4))
        assert sample(img, 100) == [Color(1, 1, 1), Color(2, 2, 2), Color(3, 3, 3), Color(4, 4, 4)]

    def test_visits_grid_coordinates_only(self):
        img = Image.new('RGB', (4, 4), (0, 0, 0))
        img.putpixel((2, 2), (200, 100, 50))
        img.putpixel((1, 1), (9, 9, 9))  # off-grid with step 2
        # ceil(sqrt(16 / 4)) = 2 -> (0,0) (2,0) (0,2) (2,2)
        pixels = sample(img, 4)
        assert len(pixels) == 4
        assert pixels[3] == Color(200, 100, 50)
        assert Color(9, 9, 9) not in pixels

    def test_transparent_pixels_skipped(self):
        img = Image.new('RGBA', (10, 10), (255, 0, 0, 0))
        img.putpixel((0, 0), (0, 255, 0, 255))
        img.putpixel((1, 0), (0, 0, 255, 1))  # almost transparent still counts
        pixels = sample(img, 1000)
        assert pixels == [Color(0, 255, 0), Color(0, 0, 255)]

    def test_fully_transparent_is_empty(self):
        img = Image.new('RGBA', (50, 50), (12, 34, 56, 0))
        pixels = sample(img, 100)
        assert pixels == []
        assert is_sample_failure(pixels)

    def test_palette_mode_image(self):
        img = Image.new('RGB', (20, 20), (40, 80, 120)).convert('P', palette=Image.Palette.ADAPTIVE)
        pixels = sample(img, 2500)
        assert len(pixels) == 400
        assert len(set(pixels)) == 1

    def test_zero_size_image(self):
        assert sample(Image.new('RGB', (0, 0)), 100) == []


class TestSampleArray:
    def test_rgb_array_is_opaque(self):
        arr = np.full((10, 10, 3), 128, dtype=np.uint8)
        assert len(sample(arr, 25)) == 25

    def test_rgba_array_alpha(self):
        arr = np.zeros((3, 3, 4), dtype=np.uint8)
        arr[1, 2] = (5, 6, 7, 255)
        assert sample(arr, 100) == [Color(5, 6, 7)]

    def test_bad_shape_returns_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger='swatchkit.core.sampler'):
            assert sample(np.zeros((4, 4), dtype=np.uint8), 10) == []
        assert 'could not read pixels' in caplog.text


class TestSamplePixelSource:
    def test_generic_source_grid(self):
        src = FakeSource(5, 5, {(2, 2): (9, 8, 7, 255)})
        pixels = sample(src, 4)
        # ceil(sqrt(25 / 4)) = 3 -> x, y in (0, 3)
        assert src.visited == [(0, 0), (3, 0), (0, 3), (3, 3)]
        assert len(pixels) == 4

    def test_rgb_source_treated_opaque(self):
        src = FakeSource(2, 1, {}, default=(1, 2, 3))
        assert sample(src, 10) == [Color(1, 2, 3), Color(1, 2, 3)]

    def test_transparent_source_pixel_skipped(self):
        src = FakeSource(2, 1, {(0, 0): (1, 2, 3, 0)}, default=(4, 5, 6, 255))
        assert sample(src, 10) == [Color(4, 5, 6)]

    def test_read_failure_returns_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger='swatchkit.core.sampler'):
            assert sample(BrokenSource(), 10) == []
        assert 'truncated' in caplog.text

    def test_invalid_max_samples_raises(self):
        with pytest.raises(ValueError):
            sample(Image.new('RGB', (4, 4)), 0)
