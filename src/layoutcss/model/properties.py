"""The closed set of supported CSS property names."""

from __future__ import annotations

from enum import Enum


class PropertyName(Enum):
    """Every property the resolver understands, keyed by its CSS name."""

    # Display
    DISPLAY = "display"
    DIRECTION = "direction"
    WIDTH = "width"
    HEIGHT = "height"
    MIN_WIDTH = "min-width"
    MIN_HEIGHT = "min-height"
    MAX_WIDTH = "max-width"
    MAX_HEIGHT = "max-height"
    OVERFLOW = "overflow"

    # Position
    POSITION = "position"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    # Flex box
    FLEX_DIRECTION = "flex-direction"
    FLEX_WRAP = "flex-wrap"
    FLEX_GROW = "flex-grow"
    FLEX_SHRINK = "flex-shrink"
    FLEX_BASIS = "flex-basis"
    ASPECT_RATIO = "aspect-ratio"

    # Alignment
    ALIGN_ITEMS = "align-items"
    ALIGN_SELF = "align-self"
    ALIGN_CONTENT = "align-content"
    JUSTIFY_CONTENT = "justify-content"

    # Margin
    MARGIN = "margin"
    MARGIN_TOP = "margin-top"
    MARGIN_RIGHT = "margin-right"
    MARGIN_BOTTOM = "margin-bottom"
    MARGIN_LEFT = "margin-left"

    # Padding
    PADDING = "padding"
    PADDING_TOP = "padding-top"
    PADDING_RIGHT = "padding-right"
    PADDING_BOTTOM = "padding-bottom"
    PADDING_LEFT = "padding-left"

    # Borders
    BORDER_WIDTH = "border-width"
    BORDER_WIDTH_TOP = "border-width-top"
    BORDER_WIDTH_RIGHT = "border-width-right"
    BORDER_WIDTH_BOTTOM = "border-width-bottom"
    BORDER_WIDTH_LEFT = "border-width-left"

    # Color
    COLOR = "color"

    @classmethod
    def from_css(cls, name: str) -> PropertyName | None:
        """Look up a property by CSS name (case-insensitive); None if unsupported."""
        name = name.strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def is_shorthand(self) -> bool:
        return self in SHORTHAND_SIDES

    @property
    def field(self) -> str:
        """Name of the matching ``OutputStyle`` field."""
        return self.value.replace("-", "_")


# Standard CSS spellings of the per-side border widths.
_ALIASES = {
    "border-top-width": "border-width-top",
    "border-right-width": "border-width-right",
    "border-bottom-width": "border-width-bottom",
    "border-left-width": "border-width-left",
}

# Shorthand -> longhands in (top, right, bottom, left) order.
SHORTHAND_SIDES: dict[PropertyName, tuple[PropertyName, PropertyName, PropertyName, PropertyName]] = {
    PropertyName.MARGIN: (
        PropertyName.MARGIN_TOP,
        PropertyName.MARGIN_RIGHT,
        PropertyName.MARGIN_BOTTOM,
        PropertyName.MARGIN_LEFT,
    ),
    PropertyName.PADDING: (
        PropertyName.PADDING_TOP,
        PropertyName.PADDING_RIGHT,
        PropertyName.PADDING_BOTTOM,
        PropertyName.PADDING_LEFT,
    ),
    PropertyName.BORDER_WIDTH: (
        PropertyName.BORDER_WIDTH_TOP,
        PropertyName.BORDER_WIDTH_RIGHT,
        PropertyName.BORDER_WIDTH_BOTTOM,
        PropertyName.BORDER_WIDTH_LEFT,
    ),
}

LONGHANDS: tuple[PropertyName, ...] = tuple(
    p for p in PropertyName if p not in SHORTHAND_SIDES
)
