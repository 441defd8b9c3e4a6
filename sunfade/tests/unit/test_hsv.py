#!/usr/bin/env python3
"""Test Hsv construction, interpolation and RGB conversion."""

import pytest

from sunfade.hsv import Hsv, interpolate

START = Hsv(hue=0.0, saturation=0.0, brightness=0.0)
END = Hsv(hue=10.0, saturation=10.0, brightness=10.0)


def assert_hsv(result, hue, saturation, brightness):
    assert result.hue == pytest.approx(hue, abs=0.1)
    assert result.saturation == pytest.approx(saturation, abs=0.1)
    assert result.brightness == pytest.approx(brightness, abs=0.1)


def test_from_hue_is_fully_saturated_and_bright():
    color = Hsv.from_hue(42.0)
    assert color == Hsv(hue=42.0, saturation=100.0, brightness=100.0)


def test_from_hue_keeps_unnormalized_hue():
    assert Hsv.from_hue(-30.0).hue == -30.0


class TestInterpolate:
    """Test Hsv.interpolate along the shortest hue arc."""

    def test_before_zero(self):
        assert_hsv(Hsv.interpolate(START, END, -1.0), 0.0, 0.0, 0.0)

    def test_zero(self):
        assert_hsv(Hsv.interpolate(START, END, 0.0), 0.0, 0.0, 0.0)

    def test_quarter(self):
        assert_hsv(Hsv.interpolate(START, END, 0.25), 2.5, 2.5, 2.5)

    def test_one(self):
        assert_hsv(Hsv.interpolate(START, END, 1.0), 10.0, 10.0, 10.0)

    def test_after_one(self):
        assert_hsv(Hsv.interpolate(START, END, 2.0), 10.0, 10.0, 10.0)

    def test_endpoints_are_returned_unchanged(self):
        """Boundaries short-circuit, so even odd inputs come back as-is."""
        start = Hsv(hue=725.0, saturation=-3.0, brightness=140.0)
        end = Hsv(hue=-90.0, saturation=50.0, brightness=50.0)
        assert Hsv.interpolate(start, end, 0.0) is start
        assert Hsv.interpolate(start, end, 1.0) is end

    def test_crosses_zero_upwards(self):
        start = Hsv.from_hue(350.0)
        end = Hsv.from_hue(20.0)
        result = Hsv.interpolate(start, end, 0.5)
        assert result.hue == pytest.approx(5.0, abs=0.1)

    def test_crosses_zero_downwards(self):
        start = Hsv.from_hue(0.0)
        end = Hsv.from_hue(340.0)
        result = Hsv.interpolate(start, end, 0.5)
        assert result.hue == pytest.approx(350.0, abs=0.1)

    def test_hue_result_is_normalized(self):
        start = Hsv.from_hue(710.0)
        end = Hsv.from_hue(730.0)
        result = Hsv.interpolate(start, end, 0.5)
        assert result.hue == pytest.approx(0.0, abs=0.1)

    def test_saturation_and_brightness_are_not_clamped(self):
        start = Hsv(hue=0.0, saturation=0.0, brightness=-50.0)
        end = Hsv(hue=0.0, saturation=200.0, brightness=50.0)
        result = Hsv.interpolate(start, end, 0.75)
        assert result.saturation == pytest.approx(150.0)
        assert result.brightness == pytest.approx(25.0)

    def test_module_function_matches_method(self):
        assert interpolate(START, END, 0.25) == Hsv.interpolate(START, END, 0.25)


class TestToRgb:
    """Test conversion to 8-bit RGB."""

    def test_everything_zero_is_black(self):
        assert Hsv(0.0, 0.0, 0.0).to_rgb_u8() == (0, 0, 0)

    def test_sat_0_brightness_100_is_white(self):
        assert Hsv(0.0, 0.0, 100.0).to_rgb_u8() == (255, 255, 255)

    def test_sat_0_brightness_50_is_everything_half(self):
        assert Hsv(0.0, 0.0, 50.0).to_rgb_u8() == (127, 127, 127)

    def test_brightness_1_is_visible(self):
        red, green, blue = Hsv(0.0, 0.0, 1.0).to_rgb_u8()
        assert red > 0
        assert green > 0
        assert blue > 0

    @pytest.mark.parametrize(
        "hue,expected",
        [
            (0.0, (255, 0, 0)),
            (120.0, (0, 255, 0)),
            (240.0, (0, 0, 255)),
            (360.0, (255, 0, 0)),
            (-360.0, (255, 0, 0)),
        ],
    )
    def test_primary_hues(self, hue, expected):
        assert Hsv.from_hue(hue).to_rgb_u8() == expected
