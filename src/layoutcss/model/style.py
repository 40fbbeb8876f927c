"""OutputStyle: the resolved layout record handed to the host."""

from __future__ import annotations

from dataclasses import dataclass

from layoutcss.model.properties import LONGHANDS, PropertyName
from layoutcss.model.values import (
    AUTO,
    WHITE,
    Keyword,
    Length,
    NonNegativeNumber,
    Value,
)

_ZERO = Length(0.0)


@dataclass(frozen=True)
class OutputStyle:
    """One field per longhand property, holding a computed value.

    Defaults are the host layout system's own defaults, so a field that no
    declaration touched reads exactly as an unstyled node would. Lengths are
    always in pixels; percentages are left for the host to resolve against
    the parent's extent.
    """

    # Display
    display: Value = Keyword("flex")
    direction: Value = Keyword("inherit")
    width: Value = AUTO
    height: Value = AUTO
    min_width: Value = AUTO
    min_height: Value = AUTO
    max_width: Value = AUTO
    max_height: Value = AUTO
    overflow: Value = Keyword("visible")

    # Position
    position: Value = Keyword("relative")
    top: Value = AUTO
    right: Value = AUTO
    bottom: Value = AUTO
    left: Value = AUTO

    # Flex box
    flex_direction: Value = Keyword("row")
    flex_wrap: Value = Keyword("nowrap")
    flex_grow: Value = NonNegativeNumber(0.0)
    flex_shrink: Value = NonNegativeNumber(1.0)
    flex_basis: Value = AUTO
    aspect_ratio: Value = AUTO

    # Alignment
    align_items: Value = Keyword("stretch")
    align_self: Value = Keyword("auto")
    align_content: Value = Keyword("stretch")
    justify_content: Value = Keyword("flex-start")

    # Margin
    margin_top: Value = _ZERO
    margin_right: Value = _ZERO
    margin_bottom: Value = _ZERO
    margin_left: Value = _ZERO

    # Padding
    padding_top: Value = _ZERO
    padding_right: Value = _ZERO
    padding_bottom: Value = _ZERO
    padding_left: Value = _ZERO

    # Borders
    border_width_top: Value = _ZERO
    border_width_right: Value = _ZERO
    border_width_bottom: Value = _ZERO
    border_width_left: Value = _ZERO

    # Color
    color: Value = WHITE

    def get(self, prop: PropertyName) -> Value:
        """Return the value of a longhand property."""
        return getattr(self, prop.field)

    def to_dict(self) -> dict[str, str]:
        """Serialize to ``{css-property-name: css-text}``."""
        return {prop.value: self.get(prop).to_css() for prop in LONGHANDS}

