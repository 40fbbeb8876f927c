"""Value resolution: property grammars, units, colors and shorthands."""

from layoutcss.values.color import parse_color
from layoutcss.values.errors import ResolutionError, ResolutionErrorKind
from layoutcss.values.grammar import PROPERTY_GRAMMARS, Grammar, parse_value, resolve
from layoutcss.values.shorthand import expand
from layoutcss.values.units import DPI, compute_value, to_pixels

__all__ = [
    "ResolutionError",
    "ResolutionErrorKind",
    "Grammar",
    "PROPERTY_GRAMMARS",
    "parse_value",
    "resolve",
    "parse_color",
    "expand",
    "DPI",
    "to_pixels",
    "compute_value",
]
