"""layoutcss model layer -- public type re-exports."""

from layoutcss.model.context import UnitContext
from layoutcss.model.diagnostic import Diagnostic, Severity
from layoutcss.model.properties import LONGHANDS, SHORTHAND_SIDES, PropertyName
from layoutcss.model.style import OutputStyle
from layoutcss.model.tag import TargetTag
from layoutcss.model.values import (
    AUTO,
    NONE,
    TRANSPARENT,
    Angle,
    AngleUnit,
    Auto,
    Color,
    Keyword,
    Length,
    LengthUnit,
    NonNegativeNumber,
    NoneValue,
    Number,
    Percentage,
    Ratio,
    Value,
    ValueKind,
)

__all__ = [
    # context
    "UnitContext",
    # diagnostic
    "Severity",
    "Diagnostic",
    # properties
    "PropertyName",
    "SHORTHAND_SIDES",
    "LONGHANDS",
    # style
    "OutputStyle",
    # tag
    "TargetTag",
    # values
    "Value",
    "ValueKind",
    "Keyword",
    "Auto",
    "NoneValue",
    "Number",
    "NonNegativeNumber",
    "Length",
    "LengthUnit",
    "Percentage",
    "Ratio",
    "Angle",
    "AngleUnit",
    "Color",
    "AUTO",
    "NONE",
    "TRANSPARENT",
]
