"""Stylesheet validator: reads a stylesheet and tries every declaration."""

from __future__ import annotations

from layoutcss.cascade.assembler import declaration_diagnostic, resolve_declaration
from layoutcss.model.context import UnitContext
from layoutcss.model.diagnostic import Diagnostic
from layoutcss.parser.stylesheet import parse_stylesheet
from layoutcss.stylesheet.model import Stylesheet
from layoutcss.values.errors import ResolutionError


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def validate(
    source: str | Stylesheet, context: UnitContext | None = None
) -> list[Diagnostic]:
    """Read *source* and resolve every declaration it keeps.

    Returns the reader's diagnostics followed by one diagnostic per
    declaration that would be dropped at assembly time.
    """
    stylesheet = parse_stylesheet(source) if isinstance(source, str) else source
    context = context or UnitContext()
    diagnostics = list(stylesheet.diagnostics)

    # Rules split from one selector list share their declarations.
    seen: set[int] = set()
    for rule in stylesheet.rules:
        if id(rule.declarations) in seen:
            continue
        seen.add(id(rule.declarations))
        for declaration in rule.declarations:
            try:
                resolve_declaration(declaration, context)
            except ResolutionError as exc:
                diagnostics.append(
                    declaration_diagnostic(declaration, exc, str(rule.selector))
                )
    return diagnostics


def validate_or_raise(
    source: str | Stylesheet, context: UnitContext | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(source, context)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
