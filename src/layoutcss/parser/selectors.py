"""Lark Transformer that converts a selector-list parse tree into SimpleSelectors."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from layoutcss.parser.errors import ParseError
from layoutcss.stylesheet.model import SimpleSelector

__all__ = ["parse_selector_list"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n\r\f]?|(.))", re.DOTALL)


def _unescape(match: re.Match[str]) -> str:
    if match.group(1) is None:
        return match.group(2)
    code = int(match.group(1), 16)
    if code == 0 or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        return "\ufffd"
    return chr(code)


def _name(token: Token) -> str:
    """Return the ident a NAME token denotes, with CSS escapes resolved."""
    return _ESCAPE.sub(_unescape, str(token))


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a list of SimpleSelector objects."""

    def id_selector(self, items: list[Token]) -> tuple[str, str]:
        return ("id", _name(items[0]))

    def class_selector(self, items: list[Token]) -> tuple[str, str]:
        return ("class", _name(items[0]))

    def selector(self, items: list[tuple[str, str]]) -> SimpleSelector:
        ids = {value for kind, value in items if kind == "id"}
        if len(ids) > 1:
            raise ParseError(f"Selector names more than one id: {sorted(ids)}")
        classes = frozenset(value for kind, value in items if kind == "class")
        return SimpleSelector(id=ids.pop() if ids else None, classes=classes)

    def start(self, items: list[SimpleSelector]) -> list[SimpleSelector]:
        return list(items)


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_selector_list(source: str) -> list[SimpleSelector]:
    """Parse a comma-separated list of simple selectors.

    Raises ParseError for anything beyond ``#id``, ``.class``, ``*`` and their
    concatenations.
    """
    source = source.strip()
    if not source:
        raise ParseError("Empty selector")
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(f"Unsupported selector syntax in {source!r}", line=line, column=column) from e
    try:
        return SelectorTransformer().transform(tree)
    except VisitError as e:
        raise ParseError(str(e.orig_exc)) from e
