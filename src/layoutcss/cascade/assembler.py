"""Fold matching declarations into an OutputStyle.

Precedence is pure document order: stylesheet declarations in rule order,
then inline declarations. There is no specificity and no ``!important``.
A declaration that fails to resolve leaves the property as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from layoutcss.model.context import UnitContext
from layoutcss.model.diagnostic import Diagnostic, Severity
from layoutcss.model.properties import PropertyName
from layoutcss.model.style import OutputStyle
from layoutcss.model.tag import TargetTag
from layoutcss.model.values import Value
from layoutcss.parser.stylesheet import parse_declarations
from layoutcss.stylesheet.matcher import matching_rules
from layoutcss.stylesheet.model import Declaration, Rule
from layoutcss.values.errors import ResolutionError, ResolutionErrorKind
from layoutcss.values.grammar import resolve
from layoutcss.values.shorthand import expand

__all__ = ["assemble", "declaration_diagnostic", "resolve_declaration", "style_from_inline"]

logger = logging.getLogger(__name__)


def resolve_declaration(
    declaration: Declaration, context: UnitContext | None = None
) -> list[tuple[PropertyName, Value]]:
    """Resolve one declaration into computed ``(longhand, value)`` pairs.

    Shorthands yield four pairs. If any side fails the whole declaration
    fails, so a shorthand is applied entirely or not at all.
    """
    context = context or UnitContext()
    return [
        (prop, resolve(prop, tokens, context))
        for prop, tokens in expand(declaration.property, declaration.value)
    ]


def declaration_diagnostic(
    declaration: Declaration, exc: ResolutionError, selector: str | None
) -> Diagnostic:
    code = "shorthand_arity" if exc.kind is ResolutionErrorKind.SHORTHAND_ARITY else "invalid_value"
    return Diagnostic(
        code=code,
        severity=Severity.WARNING,
        message=f"Declaration '{declaration}' dropped: {exc}",
        line=declaration.line,
        column=declaration.column,
        property=declaration.property.value,
        selector=selector,
    )


def assemble(
    rules: Iterable[Rule],
    tag: TargetTag,
    inline_declarations: Iterable[Declaration] = (),
    context: UnitContext | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> OutputStyle:
    """Build the style of the target tagged *tag*.

    Failed declarations are reported to *diagnostics* when a list is given
    and logged either way.
    """
    context = context or UnitContext()
    ordered: list[tuple[Declaration, str | None]] = [
        (declaration, str(rule.selector))
        for rule in matching_rules(rules, tag)
        for declaration in rule.declarations
    ]
    ordered.extend((declaration, None) for declaration in inline_declarations)

    updates: dict[str, Value] = {}
    for declaration, selector in ordered:
        try:
            resolved = resolve_declaration(declaration, context)
        except ResolutionError as exc:
            diagnostic = declaration_diagnostic(declaration, exc, selector)
            logger.warning("%s", diagnostic)
            if diagnostics is not None:
                diagnostics.append(diagnostic)
            continue
        for prop, value in resolved:
            updates[prop.field] = value

    return OutputStyle(**updates)


def style_from_inline(
    text: str,
    context: UnitContext | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> OutputStyle:
    """Build a style from an inline declaration block alone."""
    if diagnostics is None:
        diagnostics = []
    declarations = parse_declarations(text, diagnostics)
    return assemble((), TargetTag(), declarations, context, diagnostics)
