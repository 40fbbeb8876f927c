"""Stylesheet application: computes the style of every tagged target."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from layoutcss.cascade.assembler import assemble
from layoutcss.model.context import UnitContext
from layoutcss.model.diagnostic import Diagnostic
from layoutcss.model.style import OutputStyle
from layoutcss.model.tag import TargetTag
from layoutcss.parser.stylesheet import parse_declarations, parse_stylesheet
from layoutcss.stylesheet.model import Stylesheet

__all__ = ["StyledTarget", "StylesheetApplication"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyledTarget:
    """A tagged target with an optional inline ``style`` block."""

    tag: TargetTag
    inline: str = ""


class StylesheetApplication:
    """Apply one stylesheet to a set of named targets.

    Targets map a name to a TargetTag, a StyledTarget, or None. Untagged
    (None) targets are never styled and are left out of the result. Every
    target's style is rebuilt from the host defaults, so applying twice
    gives the same result.

    Diagnostics from reading the stylesheet and from every failed
    declaration accumulate on ``diagnostics``.
    """

    def __init__(
        self,
        stylesheet: Stylesheet | str,
        context: UnitContext | None = None,
    ) -> None:
        if isinstance(stylesheet, str):
            stylesheet = parse_stylesheet(stylesheet)
        self.stylesheet = stylesheet
        self.context = context or UnitContext()
        self.diagnostics: list[Diagnostic] = list(stylesheet.diagnostics)

    def style_for(self, target: TargetTag | StyledTarget) -> OutputStyle:
        if isinstance(target, StyledTarget):
            tag, inline = target.tag, target.inline
        else:
            tag, inline = target, ""
        inline_declarations = parse_declarations(inline, self.diagnostics) if inline else []
        return assemble(
            self.stylesheet.rules,
            tag,
            inline_declarations,
            self.context,
            self.diagnostics,
        )

    def apply(
        self, targets: Mapping[str, TargetTag | StyledTarget | None]
    ) -> dict[str, OutputStyle]:
        styles: dict[str, OutputStyle] = {}
        for name, target in targets.items():
            if target is None:
                logger.debug("Target %r has no tag; not styled", name)
                continue
            styles[name] = self.style_for(target)
        logger.debug(
            "Applied %d rule(s) to %d target(s)", len(self.stylesheet.rules), len(styles)
        )
        return styles
