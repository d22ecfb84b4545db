"""Tests for termpal.core.colour: hex parsing, HSV features, hue distance, scaling."""

import pytest
from termpal.core.colour import (
    hex_to_rgb,
    hue,
    hue_distance,
    is_hex,
    luminance,
    rgb_to_hex,
    round_half_up,
    saturation,
    scale,
    scale_hex,
    vibrancy,
)


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_uppercase(self):
        assert hex_to_rgb('#FF8800') == (255, 136, 0)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    def test_invalid_hex_raises(self):
        for bad in ('invalid', '#ff', '#ffffffff', '#gg0000', '#+f0000'):
            with pytest.raises(ValueError):
                hex_to_rgb(bad)


class TestRgbToHex:
    def test_lowercase(self):
        assert rgb_to_hex(171, 205, 239) == '#abcdef'

    def test_zero_padded(self):
        assert rgb_to_hex(1, 2, 3) == '#010203'

    def test_clamps(self):
        assert rgb_to_hex(300, -5, 128) == '#ff0080'

    def test_is_hex(self):
        assert is_hex('#a1b2c3')
        assert not is_hex('#A1B2C3')
        assert not is_hex('a1b2c3')
        assert not is_hex('#a1b2c')


class TestFeatures:
    def test_luminance_range(self):
        assert luminance((0, 0, 0)) == 0
        assert luminance((255, 255, 255)) == pytest.approx(255)

    def test_luminance_weights(self):
        assert luminance((100, 0, 0)) == pytest.approx(29.9)
        assert luminance((0, 100, 0)) == pytest.approx(58.7)
        assert luminance((0, 0, 100)) == pytest.approx(11.4)

    def test_saturation_black_is_zero(self):
        assert saturation((0, 0, 0)) == 0.0

    def test_saturation_gray_is_zero(self):
        assert saturation((128, 128, 128)) == 0.0

    def test_saturation_pure(self):
        assert saturation((255, 0, 0)) == 1.0

    def test_vibrancy_needs_brightness(self):
        assert vibrancy((255, 0, 0)) == pytest.approx(1.0)
        assert vibrancy((51, 0, 0)) == pytest.approx(0.2)

    def test_hue_primaries(self):
        assert hue((255, 0, 0)) == 0.0
        assert hue((255, 255, 0)) == pytest.approx(60.0)
        assert hue((0, 255, 0)) == pytest.approx(120.0)
        assert hue((0, 255, 255)) == pytest.approx(180.0)
        assert hue((0, 0, 255)) == pytest.approx(240.0)
        assert hue((255, 0, 255)) == pytest.approx(300.0)

    def test_hue_negative_sector_wraps(self):
        # max is red with blue > green: falls just below 360
        assert hue((255, 0, 168)) == pytest.approx(320.47, abs=0.01)

    def test_hue_achromatic_is_zero(self):
        assert hue((90, 90, 90)) == 0.0


class TestHueDistance:
    def test_same(self):
        assert hue_distance(42, 42) == 0

    def test_simple(self):
        assert hue_distance(10, 70) == 60

    def test_wraps_around_zero(self):
        assert hue_distance(350, 10) == 20
        assert hue_distance(10, 350) == 20

    def test_maximum_is_180(self):
        assert hue_distance(0, 180) == 180
        assert hue_distance(90, 270) == 180

    def test_symmetry(self):
        assert hue_distance(33, 299) == hue_distance(299, 33)


class TestScale:
    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.4) == 2

    def test_scale_clamps(self):
        assert scale((100, 200, 50), 2.5) == (250, 255, 125)

    def test_scale_hex(self):
        assert scale_hex('#101010', 1.8) == '#1d1d1d'

    def test_scale_black_stays_black(self):
        assert scale_hex('#000000', 2.5) == '#000000'
