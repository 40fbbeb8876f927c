"""``<color>`` parsing: keywords, hex notation, rgb()/rgba() and hsl()/hsla()."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tinycss2 import color3

from layoutcss.model.values import TRANSPARENT, Color
from layoutcss.values.errors import ResolutionError, ResolutionErrorKind
from layoutcss.values.numeric import describe, parse_angle, significant, single

__all__ = ["parse_color", "hsl_to_rgb"]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_color(tokens: Iterable[Any]) -> Color:
    token = single(tokens)
    if token.type == "ident":
        return _keyword_color(token)
    if token.type == "hash":
        return _hex_color(token.value)
    if token.type == "function":
        name = token.lower_name
        if name in ("rgb", "rgba"):
            return _rgb_color(token)
        if name in ("hsl", "hsla"):
            return _hsl_color(token)
        raise ResolutionError(
            ResolutionErrorKind.FUNCTION_NOT_SUPPORTED,
            f"Color function {token.name}() is not supported",
        )
    raise ResolutionError(
        ResolutionErrorKind.UNEXPECTED_TOKEN,
        f"Expected a color, got {describe(token)}",
    )


def _keyword_color(token: Any) -> Color:
    name = token.lower_value
    if name == "none":
        return TRANSPARENT
    if name == "currentcolor":
        raise ResolutionError(
            ResolutionErrorKind.UNSUPPORTED_VALUE,
            "currentcolor is not supported",
        )
    rgba = color3.parse_color(token)
    if rgba is None or isinstance(rgba, str):
        raise ResolutionError(
            ResolutionErrorKind.INVALID_COLOR,
            f"Unknown color name {token.value!r}",
        )
    return Color(rgba.red, rgba.green, rgba.blue, rgba.alpha)


def _hex_color(digits: str) -> Color:
    if len(digits) not in (3, 4, 6, 8) or not set(digits) <= _HEX_DIGITS:
        raise ResolutionError(
            ResolutionErrorKind.INVALID_COLOR,
            f"Invalid hex color '#{digits}'",
        )
    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)
    channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    return Color(*channels)


def _split_arguments(function: Any) -> list[Any]:
    """Return the 3 or 4 component tokens of a color function.

    Accepts ``f(a, b, c[, d])`` or ``f(a b c[ / d])``. Mixing the two forms
    is an error.
    """
    args = significant(function.arguments)
    commas = [t for t in args if t.type == "literal" and t.value == ","]
    if commas:
        values = args[0::2]
        separators = args[1::2]
        valid = (
            len(args) % 2 == 1
            and all(t.type == "literal" and t.value == "," for t in separators)
            and not any(t.type == "literal" for t in values)
        )
    else:
        slashes = [i for i, t in enumerate(args) if t.type == "literal" and t.value == "/"]
        if slashes:
            valid = slashes == [3] and len(args) == 5
            values = args[:3] + args[4:]
        else:
            valid = len(args) == 3 and not any(t.type == "literal" for t in args)
            values = args
    if not valid or len(values) not in (3, 4):
        raise ResolutionError(
            ResolutionErrorKind.INVALID_COLOR,
            f"Malformed arguments to {function.name}(): {function.serialize()!r}",
        )
    return values


def _in_range(value: float, low: float, high: float, token: Any) -> float:
    if not low <= value <= high:
        raise ResolutionError(
            ResolutionErrorKind.OUT_OF_RANGE,
            f"Color component {token.serialize()!r} is outside [{low:g}, {high:g}]",
        )
    return value


def _rgb_channel(token: Any) -> float:
    if token.type == "number":
        return _in_range(token.value, 0, 255, token) / 255.0
    if token.type == "percentage":
        return _in_range(token.value, 0, 100, token) / 100.0
    raise ResolutionError(
        ResolutionErrorKind.INVALID_COLOR,
        f"Expected a number or percentage, got {describe(token)}",
    )


def _alpha(token: Any) -> float:
    if token.type == "number":
        return float(_in_range(token.value, 0, 1, token))
    if token.type == "percentage":
        return _in_range(token.value, 0, 100, token) / 100.0
    raise ResolutionError(
        ResolutionErrorKind.INVALID_COLOR,
        f"Expected an alpha value, got {describe(token)}",
    )


def _percent(token: Any) -> float:
    if token.type != "percentage":
        raise ResolutionError(
            ResolutionErrorKind.INVALID_COLOR,
            f"Expected a percentage, got {describe(token)}",
        )
    return _in_range(token.value, 0, 100, token) / 100.0


def _hue(token: Any) -> float:
    if token.type == "number":
        degrees = float(token.value)
    elif token.type == "dimension":
        degrees = parse_angle(token).to_degrees()
    else:
        raise ResolutionError(
            ResolutionErrorKind.INVALID_COLOR,
            f"Expected a hue, got {describe(token)}",
        )
    return degrees % 360.0


def _rgb_color(function: Any) -> Color:
    values = _split_arguments(function)
    red, green, blue = (_rgb_channel(t) for t in values[:3])
    alpha = _alpha(values[3]) if len(values) == 4 else 1.0
    return Color(red, green, blue, alpha)


def _hsl_color(function: Any) -> Color:
    values = _split_arguments(function)
    hue = _hue(values[0])
    saturation = _percent(values[1])
    lightness = _percent(values[2])
    alpha = _alpha(values[3]) if len(values) == 4 else 1.0
    return Color(*hsl_to_rgb(hue, saturation, lightness), alpha)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    """Convert HSL (hue in degrees, the rest in ``[0, 1]``) to sRGB channels."""
    a = saturation * min(lightness, 1.0 - lightness)

    def channel(n: int) -> float:
        k = (n + hue / 30.0) % 12.0
        return lightness - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return channel(0), channel(8), channel(4)
