"""Table-driven value resolution.

Every longhand property maps to a Grammar: the ordered value kinds it
accepts, plus its keyword set and whether negative numbers are allowed.
Adding or changing a property is a change to PROPERTY_GRAMMARS only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import tinycss2

from layoutcss.model.context import UnitContext
from layoutcss.model.properties import PropertyName
from layoutcss.model.values import (
    AUTO,
    NONE,
    Keyword,
    NonNegativeNumber,
    Number,
    Value,
    ValueKind,
)
from layoutcss.values.color import parse_color
from layoutcss.values.errors import ResolutionError, ResolutionErrorKind
from layoutcss.values.numeric import (
    describe,
    parse_angle,
    parse_length,
    parse_number,
    parse_percentage,
    parse_ratio,
    single,
)
from layoutcss.values.units import compute_value

__all__ = ["Grammar", "PROPERTY_GRAMMARS", "grammar_for", "parse_value", "resolve"]

logger = logging.getLogger(__name__)

Tokens = Iterable[Any] | str


@dataclass(frozen=True)
class Grammar:
    """The alternatives a property accepts, tried in order."""

    kinds: tuple[ValueKind, ...]
    keywords: frozenset[str] = field(default_factory=frozenset)
    non_negative: bool = False

    def describe(self) -> str:
        parts = []
        for kind in self.kinds:
            if kind is ValueKind.KEYWORD:
                parts.extend(sorted(self.keywords))
            else:
                parts.append(kind.value)
        return " | ".join(parts)


def _keywords(*names: str) -> Grammar:
    return Grammar((ValueKind.KEYWORD,), frozenset(names))


_SIZE = Grammar((ValueKind.AUTO, ValueKind.LENGTH, ValueKind.PERCENTAGE), non_negative=True)
_MAX_SIZE = Grammar(
    (ValueKind.AUTO, ValueKind.NONE, ValueKind.LENGTH, ValueKind.PERCENTAGE),
    non_negative=True,
)
_OFFSET = Grammar((ValueKind.AUTO, ValueKind.LENGTH, ValueKind.PERCENTAGE))
_FLEX_FACTOR = Grammar((ValueKind.NON_NEGATIVE_NUMBER,))

P = PropertyName

PROPERTY_GRAMMARS: dict[PropertyName, Grammar] = {
    # Display
    P.DISPLAY: _keywords("flex", "none"),
    P.DIRECTION: _keywords("inherit", "ltr", "rtl"),
    P.WIDTH: _SIZE,
    P.HEIGHT: _SIZE,
    P.MIN_WIDTH: _SIZE,
    P.MIN_HEIGHT: _SIZE,
    P.MAX_WIDTH: _MAX_SIZE,
    P.MAX_HEIGHT: _MAX_SIZE,
    P.OVERFLOW: _keywords("visible", "hidden"),
    # Position
    P.POSITION: _keywords("relative", "absolute"),
    P.TOP: _OFFSET,
    P.RIGHT: _OFFSET,
    P.BOTTOM: _OFFSET,
    P.LEFT: _OFFSET,
    # Flex box
    P.FLEX_DIRECTION: _keywords("row", "column", "row-reverse", "column-reverse"),
    P.FLEX_WRAP: _keywords("nowrap", "wrap", "wrap-reverse"),
    P.FLEX_GROW: _FLEX_FACTOR,
    P.FLEX_SHRINK: _FLEX_FACTOR,
    P.FLEX_BASIS: _SIZE,
    P.ASPECT_RATIO: Grammar((ValueKind.AUTO, ValueKind.RATIO)),
    # Alignment
    P.ALIGN_ITEMS: _keywords("flex-start", "flex-end", "center", "baseline", "stretch"),
    P.ALIGN_SELF: _keywords("auto", "flex-start", "flex-end", "center", "baseline", "stretch"),
    P.ALIGN_CONTENT: _keywords(
        "flex-start", "flex-end", "center", "stretch", "space-between", "space-around"
    ),
    P.JUSTIFY_CONTENT: _keywords(
        "flex-start", "flex-end", "center", "space-between", "space-around", "space-evenly"
    ),
    # Margin
    P.MARGIN_TOP: _OFFSET,
    P.MARGIN_RIGHT: _OFFSET,
    P.MARGIN_BOTTOM: _OFFSET,
    P.MARGIN_LEFT: _OFFSET,
    # Padding
    P.PADDING_TOP: _SIZE,
    P.PADDING_RIGHT: _SIZE,
    P.PADDING_BOTTOM: _SIZE,
    P.PADDING_LEFT: _SIZE,
    # Borders
    P.BORDER_WIDTH_TOP: _SIZE,
    P.BORDER_WIDTH_RIGHT: _SIZE,
    P.BORDER_WIDTH_BOTTOM: _SIZE,
    P.BORDER_WIDTH_LEFT: _SIZE,
    # Color
    P.COLOR: Grammar((ValueKind.COLOR,)),
}


# ---------------------------------------------------------------------------
# Per-kind parsers
# ---------------------------------------------------------------------------


def _ident(tokens: list[Any], expected: str) -> str:
    token = single(tokens)
    if token.type != "ident":
        raise ResolutionError(
            ResolutionErrorKind.UNEXPECTED_TOKEN,
            f"Expected {expected}, got {describe(token)}",
        )
    return token.lower_value


def _parse_auto(tokens: list[Any], grammar: Grammar) -> Value:
    if _ident(tokens, "'auto'") != "auto":
        raise ResolutionError(ResolutionErrorKind.UNEXPECTED_TOKEN, "Expected 'auto'")
    return AUTO


def _parse_none(tokens: list[Any], grammar: Grammar) -> Value:
    if _ident(tokens, "'none'") != "none":
        raise ResolutionError(ResolutionErrorKind.UNEXPECTED_TOKEN, "Expected 'none'")
    return NONE


def _parse_keyword(tokens: list[Any], grammar: Grammar) -> Value:
    name = _ident(tokens, "a keyword")
    if name not in grammar.keywords:
        raise ResolutionError(
            ResolutionErrorKind.UNEXPECTED_TOKEN,
            f"Unknown keyword {name!r}",
        )
    return Keyword(name)


def _parse_number(tokens: list[Any], grammar: Grammar) -> Value:
    return Number(parse_number(single(tokens), grammar.non_negative))


def _parse_non_negative_number(tokens: list[Any], grammar: Grammar) -> Value:
    return NonNegativeNumber(parse_number(single(tokens), non_negative=True))


def _parse_length(tokens: list[Any], grammar: Grammar) -> Value:
    return parse_length(single(tokens), grammar.non_negative)


def _parse_percentage(tokens: list[Any], grammar: Grammar) -> Value:
    return parse_percentage(single(tokens), grammar.non_negative)


def _parse_angle(tokens: list[Any], grammar: Grammar) -> Value:
    return parse_angle(single(tokens))


def _parse_ratio(tokens: list[Any], grammar: Grammar) -> Value:
    return parse_ratio(tokens)


def _parse_color(tokens: list[Any], grammar: Grammar) -> Value:
    return parse_color(tokens)


_KIND_PARSERS: dict[ValueKind, Callable[[list[Any], Grammar], Value]] = {
    ValueKind.AUTO: _parse_auto,
    ValueKind.NONE: _parse_none,
    ValueKind.KEYWORD: _parse_keyword,
    ValueKind.NUMBER: _parse_number,
    ValueKind.NON_NEGATIVE_NUMBER: _parse_non_negative_number,
    ValueKind.LENGTH: _parse_length,
    ValueKind.PERCENTAGE: _parse_percentage,
    ValueKind.ANGLE: _parse_angle,
    ValueKind.RATIO: _parse_ratio,
    ValueKind.COLOR: _parse_color,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _components(tokens: Tokens) -> list[Any]:
    if isinstance(tokens, str):
        return tinycss2.parse_component_value_list(tokens, skip_comments=True)
    return list(tokens)


def grammar_for(prop: PropertyName | str) -> tuple[PropertyName, Grammar]:
    """Look up the grammar of a longhand property.

    Raises ResolutionError(UNKNOWN_PROPERTY) for unsupported names and for
    shorthands, which must be expanded first.
    """
    if isinstance(prop, str):
        name = prop
        found = PropertyName.from_css(prop)
        if found is None:
            raise ResolutionError(
                ResolutionErrorKind.UNKNOWN_PROPERTY,
                f"Unsupported property {name!r}",
            )
        prop = found
    grammar = PROPERTY_GRAMMARS.get(prop)
    if grammar is None:
        raise ResolutionError(
            ResolutionErrorKind.UNKNOWN_PROPERTY,
            f"{prop.value!r} is a shorthand; expand it before resolving",
        )
    return prop, grammar


def parse_value(prop: PropertyName | str, tokens: Tokens) -> Value:
    """Parse *tokens* as the specified value of *prop*.

    Alternatives are tried in the grammar's order and the first success wins.
    When none matches, the ResolutionError carries one cause per alternative.
    """
    prop, grammar = grammar_for(prop)
    components = _components(tokens)
    causes: list[ResolutionError] = []
    for kind in grammar.kinds:
        try:
            return _KIND_PARSERS[kind](components, grammar)
        except ResolutionError as exc:
            causes.append(exc)
    text = tinycss2.serialize(components).strip()
    detail = "; ".join(str(cause) for cause in causes)
    raise ResolutionError(
        ResolutionErrorKind.UNSUPPORTED_VALUE,
        f"Invalid value for {prop.value}: {text!r} (expected {grammar.describe()}: {detail})",
        causes,
    )


def resolve(
    prop: PropertyName | str,
    tokens: Tokens,
    context: UnitContext | None = None,
) -> Value:
    """Parse and compute a value: lengths come back in pixels."""
    value = compute_value(parse_value(prop, tokens), context or UnitContext())
    logger.debug("Resolved %s to %s", getattr(prop, "value", prop), value.to_css())
    return value
