"""Unit context: the reference measurements relative lengths resolve against."""

from __future__ import annotations

from dataclasses import dataclass

# Default text size of the host UI toolkit, used for both font sizes.
DEFAULT_FONT_SIZE_PX = 12.0


@dataclass(frozen=True)
class UnitContext:
    """Conversion parameters for one resolution pass.

    Supplied by the caller and never mutated by the resolver, so a single
    context can be shared by any number of concurrent assembly passes.

    Attributes:
        root_font_size_px: Font size of the root node, the basis of ``rem``.
        font_size_px: Font size of the node being styled, the basis of
            ``em``, ``ex`` and ``ch``.
        viewport_width_px: Viewport width, the basis of ``vw``.
        viewport_height_px: Viewport height, the basis of ``vh``.
        vertical_text: Whether text runs vertically; widens the ``ch``
            approximation from half to a full em.
    """

    root_font_size_px: float = DEFAULT_FONT_SIZE_PX
    font_size_px: float = DEFAULT_FONT_SIZE_PX
    viewport_width_px: float = 0.0
    viewport_height_px: float = 0.0
    vertical_text: bool = False

    @property
    def viewport_min_px(self) -> float:
        return min(self.viewport_width_px, self.viewport_height_px)

    @property
    def viewport_max_px(self) -> float:
        return max(self.viewport_width_px, self.viewport_height_px)
