"""Tests for termpal.core.quantize: histogram of quantised colours."""

import numpy as np
import pytest
from termpal.core.quantize import quantize
from termpal.core.types import PixelBuffer


class TestQuantize:
    def test_empty_buffer(self):
        assert quantize(b'', 24) == {}

    def test_single_pixel_snaps(self):
        # 200/24 = 8.33 -> 192, 50/24 = 2.08 -> 48
        assert quantize(bytes([200, 50, 50]), 24) == {(192, 48, 48): 1}

    def test_rounds_half_up(self):
        # 12/24 = 0.5 -> 1 * 24
        assert quantize(bytes([12, 36, 0]), 24) == {(24, 48, 0): 1}

    def test_clamps_to_255(self):
        # 255/24 = 10.6 -> 264, clamped
        assert quantize(bytes([255, 255, 255]), 24) == {(255, 255, 255): 1}

    def test_counts_every_pixel(self):
        data = bytes([10, 10, 10] * 5 + [250, 0, 0] * 3)
        hist = quantize(data, 32)
        assert sum(hist.values()) == 8
        assert hist[(0, 0, 0)] == 5
        assert hist[(255, 0, 0)] == 3

    def test_nearby_colours_merge(self):
        data = bytes([100, 100, 100, 104, 98, 101])
        assert quantize(data, 24) == {(96, 96, 96): 2}

    def test_step_one_is_identity(self):
        data = bytes([1, 2, 3, 4, 5, 6])
        assert quantize(data, 1) == {(1, 2, 3): 1, (4, 5, 6): 1}

    def test_accepts_numpy_array(self):
        arr = np.full((4, 4, 3), 128, dtype=np.uint8)
        assert quantize(arr, 24) == {(120, 120, 120): 16}

    def test_accepts_pixel_buffer(self):
        buf = PixelBuffer(width=2, height=1, data=bytes([0, 0, 0, 255, 255, 255]))
        assert quantize(buf, 24) == {(0, 0, 0): 1, (255, 255, 255): 1}

    def test_rejects_partial_pixel(self):
        with pytest.raises(ValueError):
            quantize(bytes([1, 2, 3, 4]), 24)

    def test_rejects_bad_step(self):
        with pytest.raises(ValueError):
            quantize(bytes([1, 2, 3]), 0)

    def test_deterministic_order(self):
        data = bytes([250, 0, 0, 0, 0, 250, 0, 250, 0])
        assert list(quantize(data, 24)) == list(quantize(data, 24))


class TestPixelBuffer:
    def test_size_checked(self):
        with pytest.raises(ValueError):
            PixelBuffer(width=2, height=2, data=b'\x00' * 11)
