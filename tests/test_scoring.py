"""Tests for termpal.core.scoring: composite score and sample features."""

import math

import pytest
from termpal.core.config import ScoreWeights
from termpal.core.scoring import analyse, make_sample, score


class TestScore:
    def test_reference_weights(self):
        expected = math.log(11) * 0.3 + 0.5 * 40 + 0.25 * 30
        assert score(10, 0.5, 0.25) == pytest.approx(expected)

    def test_monotonic_in_count(self):
        assert score(100, 0.3, 0.3) > score(10, 0.3, 0.3)

    def test_monotonic_in_vibrancy(self):
        assert score(10, 0.6, 0.3) > score(10, 0.3, 0.3)

    def test_monotonic_in_saturation(self):
        assert score(10, 0.3, 0.6) > score(10, 0.3, 0.3)

    def test_rare_accent_beats_dominant_gray(self):
        gray = score(20000, 0.0, 0.0)
        accent = score(15, 0.9, 1.0)
        assert accent > gray

    def test_custom_weights(self):
        w = ScoreWeights(frequency=1.0, vibrancy=0.0, saturation=0.0)
        assert score(0, 1.0, 1.0, w) == 0.0


class TestMakeSample:
    def test_features(self):
        s = make_sample((192, 48, 48), 7)
        assert s.count == 7
        assert s.luminance == pytest.approx(0.299 * 192 + 0.587 * 48 + 0.114 * 48)
        assert s.saturation == pytest.approx(0.75)
        assert s.vibrancy == pytest.approx(0.75 * 192 / 255)
        assert s.hue == 0.0
        assert s.hex == '#c03030'

    def test_gray_has_zero_hue(self):
        s = make_sample((120, 120, 120), 1)
        assert s.saturation == 0.0
        assert s.hue == 0.0

    def test_immutable(self):
        s = make_sample((1, 2, 3), 1)
        with pytest.raises(AttributeError):
            s.count = 5  # type: ignore[misc]


class TestAnalyse:
    def test_preserves_order(self):
        hist = {(0, 0, 0): 3, (255, 0, 0): 1, (0, 0, 255): 2}
        samples = analyse(hist)
        assert [s.rgb for s in samples] == list(hist)

    def test_empty(self):
        assert analyse({}) == []

    def test_deterministic(self):
        hist = {(10, 20, 30): 4, (200, 100, 50): 9}
        assert analyse(hist) == analyse(hist)
