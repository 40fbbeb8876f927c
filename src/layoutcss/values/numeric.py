"""Parsers for the numeric value grammars: number, length, percentage, angle, ratio.

Each parser takes tinycss2 component values and either returns a typed value
or raises ResolutionError. Whitespace and comments are never significant.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from layoutcss.model.values import (
    Angle,
    AngleUnit,
    Length,
    LengthUnit,
    Percentage,
    Ratio,
)
from layoutcss.values.errors import ResolutionError, ResolutionErrorKind

__all__ = [
    "significant",
    "single",
    "describe",
    "parse_number",
    "parse_length",
    "parse_percentage",
    "parse_angle",
    "parse_ratio",
]


def significant(tokens: Iterable[Any]) -> list[Any]:
    """Drop whitespace and comments from a component value list."""
    return [t for t in tokens if t.type not in ("whitespace", "comment")]


def describe(token: Any) -> str:
    return f"{token.type} {token.serialize()!r}"


def single(tokens: Iterable[Any]) -> Any:
    """Return the only significant component value, or raise."""
    values = significant(tokens)
    if not values:
        raise ResolutionError(ResolutionErrorKind.UNEXPECTED_TOKEN, "Missing value")
    if len(values) > 1:
        extra = " ".join(t.serialize() for t in values[1:])
        raise ResolutionError(
            ResolutionErrorKind.UNEXPECTED_TOKEN,
            f"Unexpected trailing input: {extra!r}",
        )
    return values[0]


def _reject_function(token: Any) -> None:
    if token.type == "function":
        raise ResolutionError(
            ResolutionErrorKind.FUNCTION_NOT_SUPPORTED,
            f"Function {token.name}() is not supported here",
        )


def _check_range(value: float, non_negative: bool, token: Any) -> None:
    if non_negative and value < 0:
        raise ResolutionError(
            ResolutionErrorKind.OUT_OF_RANGE,
            f"Negative value not allowed: {token.serialize()!r}",
        )


def parse_number(token: Any, non_negative: bool = False) -> float:
    _reject_function(token)
    if token.type != "number":
        raise ResolutionError(
            ResolutionErrorKind.UNEXPECTED_TOKEN,
            f"Expected a number, got {describe(token)}",
        )
    _check_range(token.value, non_negative, token)
    return float(token.value)


def parse_length(token: Any, non_negative: bool = False) -> Length:
    """Parse a ``<length>``; a bare ``0`` is accepted as ``0px``."""
    _reject_function(token)
    if token.type == "dimension":
        unit = LengthUnit.from_css(token.unit)
        if unit is None:
            raise ResolutionError(
                ResolutionErrorKind.UNEXPECTED_DIMENSION,
                f"Unrecognized length unit {token.unit!r}",
            )
        _check_range(token.value, non_negative, token)
        return Length(float(token.value), unit)
    if token.type == "number":
        # Apart from zero, a bare number is not a length.
        if token.value == 0:
            return Length(0.0)
        raise ResolutionError(
            ResolutionErrorKind.MISSING_DIMENSION,
            f"Number {token.serialize()!r} needs a unit",
        )
    raise ResolutionError(
        ResolutionErrorKind.UNEXPECTED_TOKEN,
        f"Expected a length, got {describe(token)}",
    )


def parse_percentage(token: Any, non_negative: bool = False) -> Percentage:
    _reject_function(token)
    if token.type != "percentage":
        raise ResolutionError(
            ResolutionErrorKind.UNEXPECTED_TOKEN,
            f"Expected a percentage, got {describe(token)}",
        )
    _check_range(token.value, non_negative, token)
    return Percentage(float(token.value))


def parse_angle(token: Any) -> Angle:
    _reject_function(token)
    if token.type != "dimension":
        raise ResolutionError(
            ResolutionErrorKind.UNEXPECTED_TOKEN,
            f"Expected an angle, got {describe(token)}",
        )
    unit = AngleUnit.from_css(token.unit)
    if unit is None:
        raise ResolutionError(
            ResolutionErrorKind.UNEXPECTED_DIMENSION,
            f"Unrecognized angle unit {token.unit!r}",
        )
    return Angle(float(token.value), unit)


def parse_ratio(tokens: Iterable[Any]) -> Ratio:
    """Parse ``<number>`` or ``<number> / <number>``; both terms non-negative."""
    values = significant(tokens)
    if len(values) == 1:
        return Ratio(parse_number(values[0], non_negative=True), 1.0)
    if len(values) == 3 and values[1].type == "literal" and values[1].value == "/":
        return Ratio(
            parse_number(values[0], non_negative=True),
            parse_number(values[2], non_negative=True),
        )
    raise ResolutionError(
        ResolutionErrorKind.UNEXPECTED_TOKEN,
        "Expected a ratio such as '16 / 9'",
    )
