"""Length conversion to pixels, and computation of specified values."""

from __future__ import annotations

from layoutcss.model.context import UnitContext
from layoutcss.model.values import AUTO, Length, LengthUnit, Ratio, Value

__all__ = ["DPI", "PX_PER_UNIT", "to_pixels", "compute_value"]

DPI = 96.0

PX_PER_UNIT: dict[LengthUnit, float] = {
    LengthUnit.PX: 1.0,
    LengthUnit.IN: DPI,
    LengthUnit.CM: DPI / 2.54,
    LengthUnit.MM: DPI / 25.4,
    LengthUnit.Q: DPI / 101.6,
    LengthUnit.PC: DPI / 6.0,
    LengthUnit.PT: DPI / 72.0,
}

# Approximate x-height and "0" advance, as fractions of the font size.
EX_RATIO = 0.5
CH_RATIO = 0.5
CH_RATIO_VERTICAL = 1.0


def to_pixels(length: Length, context: UnitContext) -> float:
    """Return *length* in pixels under *context*.

    The conversion is linear in ``length.value`` for every unit.
    """
    unit = length.unit
    if unit.is_absolute:
        return length.value * PX_PER_UNIT[unit]
    if unit is LengthUnit.EM:
        return length.value * context.font_size_px
    if unit is LengthUnit.REM:
        return length.value * context.root_font_size_px
    if unit is LengthUnit.EX:
        return length.value * context.font_size_px * EX_RATIO
    if unit is LengthUnit.CH:
        ratio = CH_RATIO_VERTICAL if context.vertical_text else CH_RATIO
        return length.value * context.font_size_px * ratio
    if unit is LengthUnit.VW:
        return length.value * context.viewport_width_px / 100.0
    if unit is LengthUnit.VH:
        return length.value * context.viewport_height_px / 100.0
    if unit is LengthUnit.VMIN:
        return length.value * context.viewport_min_px / 100.0
    return length.value * context.viewport_max_px / 100.0


def compute_value(value: Value, context: UnitContext) -> Value:
    """Turn a specified value into a computed one.

    Lengths become pixel lengths and degenerate ratios become ``auto``.
    Everything else, percentages included, is returned unchanged.
    """
    if isinstance(value, Length):
        if value.unit is LengthUnit.PX:
            return value
        return Length(to_pixels(value, context), LengthUnit.PX)
    if isinstance(value, Ratio) and value.is_degenerate:
        return AUTO
    return value
