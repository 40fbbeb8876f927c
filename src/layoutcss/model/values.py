"""Typed CSS values: the closed set every property resolves into."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


def _fmt(number: float) -> str:
    """Format a float the way CSS authors write it (no trailing ``.0``)."""
    text = f"{number:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class LengthUnit(Enum):
    """Recognized ``<length>`` units, keyed by their lower-case CSS spelling."""

    # Absolute
    PX = "px"
    CM = "cm"
    MM = "mm"
    Q = "q"
    IN = "in"
    PC = "pc"
    PT = "pt"
    # Font relative
    EM = "em"
    REM = "rem"
    EX = "ex"
    CH = "ch"
    # Viewport relative
    VW = "vw"
    VH = "vh"
    VMIN = "vmin"
    VMAX = "vmax"

    @classmethod
    def from_css(cls, unit: str) -> LengthUnit | None:
        try:
            return cls(unit.lower())
        except ValueError:
            return None

    @property
    def is_absolute(self) -> bool:
        return self in _ABSOLUTE_UNITS

    @property
    def css(self) -> str:
        return "Q" if self is LengthUnit.Q else self.value


_ABSOLUTE_UNITS = frozenset({
    LengthUnit.PX,
    LengthUnit.CM,
    LengthUnit.MM,
    LengthUnit.Q,
    LengthUnit.IN,
    LengthUnit.PC,
    LengthUnit.PT,
})


class AngleUnit(Enum):
    """Recognized ``<angle>`` units."""

    DEG = "deg"
    GRAD = "grad"
    RAD = "rad"
    TURN = "turn"

    @classmethod
    def from_css(cls, unit: str) -> AngleUnit | None:
        try:
            return cls(unit.lower())
        except ValueError:
            return None


_DEGREES_PER_UNIT = {
    AngleUnit.DEG: 1.0,
    AngleUnit.GRAD: 360.0 / 400.0,
    AngleUnit.RAD: 180.0 / math.pi,
    AngleUnit.TURN: 360.0,
}


class ValueKind(Enum):
    """The value variants a property grammar can accept."""

    AUTO = "auto"
    NONE = "none"
    KEYWORD = "keyword"
    NUMBER = "number"
    NON_NEGATIVE_NUMBER = "non-negative number"
    LENGTH = "length"
    PERCENTAGE = "percentage"
    RATIO = "ratio"
    ANGLE = "angle"
    COLOR = "color"


@dataclass(frozen=True)
class Keyword:
    name: str

    def to_css(self) -> str:
        return self.name


@dataclass(frozen=True)
class Auto:
    def to_css(self) -> str:
        return "auto"


@dataclass(frozen=True)
class NoneValue:
    def to_css(self) -> str:
        return "none"


@dataclass(frozen=True)
class Number:
    value: float

    def to_css(self) -> str:
        return _fmt(self.value)


@dataclass(frozen=True)
class NonNegativeNumber:
    value: float

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"NonNegativeNumber cannot be negative: {self.value}")

    def to_css(self) -> str:
        return _fmt(self.value)


@dataclass(frozen=True)
class Length:
    value: float
    unit: LengthUnit = LengthUnit.PX

    def to_css(self) -> str:
        return f"{_fmt(self.value)}{self.unit.css}"


@dataclass(frozen=True)
class Percentage:
    """A percentage on the 0-100 scale (``50%`` is ``Percentage(50.0)``)."""

    value: float

    def to_css(self) -> str:
        return f"{_fmt(self.value)}%"


@dataclass(frozen=True)
class Ratio:
    """A ratio ``numerator / denominator``; both terms are non-negative."""

    numerator: float
    denominator: float = 1.0

    @property
    def is_degenerate(self) -> bool:
        """True when either term is zero or infinite."""
        return any(t == 0 or math.isinf(t) for t in (self.numerator, self.denominator))

    def to_css(self) -> str:
        return f"{_fmt(self.numerator)} / {_fmt(self.denominator)}"


@dataclass(frozen=True)
class Angle:
    value: float
    unit: AngleUnit = AngleUnit.DEG

    def to_degrees(self) -> float:
        return self.value * _DEGREES_PER_UNIT[self.unit]

    def to_css(self) -> str:
        return f"{_fmt(self.value)}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An sRGB color with every channel normalized to ``[0.0, 1.0]``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def to_rgba8(self) -> tuple[int, int, int, float]:
        return (
            round(self.red * 255),
            round(self.green * 255),
            round(self.blue * 255),
            self.alpha,
        )

    def to_css(self) -> str:
        red, green, blue, alpha = self.to_rgba8()
        if alpha == 1.0:
            return f"#{red:02x}{green:02x}{blue:02x}"
        return f"rgba({red}, {green}, {blue}, {_fmt(alpha)})"


Value = Union[
    Keyword,
    Auto,
    NoneValue,
    Number,
    NonNegativeNumber,
    Length,
    Percentage,
    Ratio,
    Angle,
    Color,
]

AUTO = Auto()
NONE = NoneValue()
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
