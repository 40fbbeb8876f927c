"""layoutcss: resolve CSS-like stylesheets into typed layout styles."""

from layoutcss.cascade import StyledTarget, StylesheetApplication, assemble, style_from_inline
from layoutcss.model import OutputStyle, TargetTag, UnitContext
from layoutcss.parser import parse_declarations, parse_stylesheet
from layoutcss.values import ResolutionError, parse_value, resolve

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "assemble",
    "style_from_inline",
    "StyledTarget",
    "StylesheetApplication",
    "OutputStyle",
    "TargetTag",
    "UnitContext",
    "parse_declarations",
    "parse_stylesheet",
    "ResolutionError",
    "parse_value",
    "resolve",
]
