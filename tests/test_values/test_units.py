"""Tests for length-to-pixel conversion."""

import pytest

from layoutcss.model.context import UnitContext
from layoutcss.model.values import AUTO, Length, LengthUnit, Percentage, Ratio
from layoutcss.values.units import DPI, compute_value, to_pixels

U = LengthUnit


@pytest.fixture()
def context() -> UnitContext:
    return UnitContext(
        root_font_size_px=10.0,
        font_size_px=20.0,
        viewport_width_px=800.0,
        viewport_height_px=600.0,
    )


# ---------------------------------------------------------------------------
# Absolute units
# ---------------------------------------------------------------------------


class TestAbsoluteUnits:
    @pytest.mark.parametrize(
        "length, px",
        [
            (Length(7.0, U.PX), 7.0),
            (Length(1.0, U.IN), 96.0),
            (Length(2.54, U.CM), 96.0),
            (Length(25.4, U.MM), 96.0),
            (Length(101.6, U.Q), 96.0),
            (Length(1.0, U.PC), 16.0),
            (Length(72.0, U.PT), 96.0),
        ],
    )
    def test_conversion(self, length, px):
        assert to_pixels(length, UnitContext()) == pytest.approx(px)

    def test_dpi(self):
        assert DPI == 96.0

    def test_context_independent(self, context):
        assert to_pixels(Length(1.0, U.CM), context) == to_pixels(Length(1.0, U.CM), UnitContext())


# ---------------------------------------------------------------------------
# Relative units
# ---------------------------------------------------------------------------


class TestFontRelativeUnits:
    def test_em(self, context):
        assert to_pixels(Length(1.5, U.EM), context) == 30.0

    def test_rem(self, context):
        assert to_pixels(Length(1.5, U.REM), context) == 15.0

    def test_ex_is_half_font_size(self, context):
        assert to_pixels(Length(2.0, U.EX), context) == 20.0

    def test_ch_is_half_font_size(self, context):
        assert to_pixels(Length(2.0, U.CH), context) == 20.0

    def test_ch_vertical_text_is_full_font_size(self):
        vertical = UnitContext(font_size_px=20.0, vertical_text=True)
        assert to_pixels(Length(2.0, U.CH), vertical) == 40.0

    def test_default_font_size(self):
        assert to_pixels(Length(1.0, U.EM), UnitContext()) == 12.0


class TestViewportUnits:
    @pytest.mark.parametrize(
        "length, px",
        [
            (Length(50.0, U.VW), 400.0),
            (Length(50.0, U.VH), 300.0),
            (Length(10.0, U.VMIN), 60.0),
            (Length(10.0, U.VMAX), 80.0),
            (Length(12.5, U.VW), 100.0),
        ],
    )
    def test_conversion(self, context, length, px):
        assert to_pixels(length, context) == pytest.approx(px)

    def test_no_truncation(self):
        ctx = UnitContext(viewport_width_px=333.0, viewport_height_px=333.0)
        assert to_pixels(Length(1.0, U.VW), ctx) == pytest.approx(3.33)


class TestLinearity:
    @pytest.mark.parametrize("unit", list(LengthUnit))
    def test_scaling(self, context, unit):
        one = to_pixels(Length(1.0, unit), context)
        assert to_pixels(Length(3.0, unit), context) == pytest.approx(3 * one)
        assert to_pixels(Length(-2.0, unit), context) == pytest.approx(-2 * one)
        assert to_pixels(Length(0.0, unit), context) == 0.0


# ---------------------------------------------------------------------------
# Computed values
# ---------------------------------------------------------------------------


class TestComputeValue:
    def test_length_becomes_pixels(self, context):
        assert compute_value(Length(2.0, U.EM), context) == Length(40.0, U.PX)

    def test_pixels_unchanged(self, context):
        value = Length(3.0)
        assert compute_value(value, context) is value

    def test_percentage_never_converted(self, context):
        assert compute_value(Percentage(50.0), context) == Percentage(50.0)

    @pytest.mark.parametrize("ratio", [Ratio(0.0, 1.0), Ratio(16.0, 0.0), Ratio(float("inf"), 1.0)])
    def test_degenerate_ratio_is_auto(self, context, ratio):
        assert compute_value(ratio, context) is AUTO

    def test_ratio_kept(self, context):
        assert compute_value(Ratio(16.0, 9.0), context) == Ratio(16.0, 9.0)
