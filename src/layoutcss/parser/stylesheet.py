"""Tolerant reader for stylesheets and inline declaration blocks.

Syntax example:
    #sidebar.panel { width: 25%; padding: 4px 8px; }
    .button, .link { color: rgb(65, 75, 85); }

Tokenizing and block structure come from tinycss2. Anything this reader
cannot use (a malformed declaration, an unsupported selector, an unclosed
block) drops only the declaration or rule it occurs in and is recorded as a
Diagnostic; the rest of the input is still read.
"""

from __future__ import annotations

import logging
from typing import Any

import tinycss2

from layoutcss.model.diagnostic import Diagnostic, Severity
from layoutcss.model.properties import PropertyName
from layoutcss.parser.errors import ParseError
from layoutcss.parser.selectors import parse_selector_list
from layoutcss.stylesheet.model import Declaration, Rule, Stylesheet

__all__ = ["parse_stylesheet", "parse_declarations"]

logger = logging.getLogger(__name__)


def _report(
    diagnostics: list[Diagnostic],
    code: str,
    severity: Severity,
    message: str,
    node: Any = None,
    **extra: str | None,
) -> None:
    diagnostic = Diagnostic(
        code=code,
        severity=severity,
        message=message,
        line=getattr(node, "source_line", None),
        column=getattr(node, "source_column", None),
        **extra,
    )
    diagnostics.append(diagnostic)
    logger.log(
        logging.DEBUG if severity is Severity.INFO else logging.WARNING,
        "%s",
        diagnostic,
    )


_EOF_MARK = "layoutcss-eof"


def _ends_inside_block(source: str) -> bool:
    """Return True when tinycss2 reaches the end of *source* inside a block.

    tinycss2 closes open ``{}``, ``()`` and ``[]`` blocks at EOF without
    reporting it. A marker ident is appended and tokenized with the source:
    it lands at the top level only if every block was closed. The leading
    ``*/`` ends a comment left open at EOF.
    """
    tokens = tinycss2.parse_component_value_list(
        f"{source}\n*/ {_EOF_MARK}", skip_comments=True
    )
    return not any(
        token.type == "ident" and token.value == _EOF_MARK for token in tokens
    )


def _read_declarations(
    content: str | list[Any],
    diagnostics: list[Diagnostic],
    selector: str | None = None,
) -> list[Declaration]:
    declarations: list[Declaration] = []
    items = tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    )
    for item in items:
        if item.type == "at-rule":
            _report(
                diagnostics, "unsupported_at_rule", Severity.INFO,
                f"Unsupported at-rule @{item.at_keyword} skipped",
                item, selector=selector,
            )
            continue
        if item.type != "declaration":
            message = getattr(item, "message", f"Unexpected {item.type}")
            _report(
                diagnostics, "invalid_declaration", Severity.ERROR,
                f"Declaration dropped: {message}", item, selector=selector,
            )
            continue

        prop = PropertyName.from_css(item.name)
        if prop is None:
            _report(
                diagnostics, "unknown_property", Severity.INFO,
                f"Unsupported property {item.name!r} skipped",
                item, property=item.name, selector=selector,
            )
            continue
        if item.important:
            _report(
                diagnostics, "important_ignored", Severity.INFO,
                "!important carries no extra weight and is ignored",
                item, property=prop.value, selector=selector,
            )
        declarations.append(
            Declaration(
                property=prop,
                value=tuple(item.value),
                important=item.important,
                line=item.source_line,
                column=item.source_column,
            )
        )
    return declarations


def parse_declarations(
    source: str, diagnostics: list[Diagnostic] | None = None
) -> list[Declaration]:
    """Parse a bare declaration block such as an inline ``style`` string.

    Returns the supported declarations in source order. Problems are appended
    to *diagnostics* when a list is given.
    """
    if diagnostics is None:
        diagnostics = []
    return _read_declarations(source, diagnostics)


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet text into a Stylesheet.

    A rule with a selector list produces one Rule per selector, consecutive and
    in source order. Rules with no supported declarations are left out.
    """
    diagnostics: list[Diagnostic] = []
    rules: list[Rule] = []

    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    unclosed = _ends_inside_block(source)

    for index, node in enumerate(nodes):
        if node.type == "error":
            _report(
                diagnostics, "invalid_rule", Severity.ERROR,
                f"Rule dropped: {node.message}", node,
            )
            continue
        if node.type == "at-rule":
            _report(
                diagnostics, "unsupported_at_rule", Severity.INFO,
                f"Unsupported at-rule @{node.at_keyword} skipped", node,
            )
            continue

        selector_text = tinycss2.serialize(
            [token for token in node.prelude if token.type != "comment"]
        ).strip()

        if unclosed and index == len(nodes) - 1:
            _report(
                diagnostics, "unclosed_block", Severity.ERROR,
                "Rule dropped: block is not closed before the end of the stylesheet",
                node, selector=selector_text,
            )
            continue

        try:
            selectors = parse_selector_list(selector_text)
        except ParseError as exc:
            _report(
                diagnostics, "invalid_selector", Severity.ERROR,
                f"Rule dropped: {exc}", node, selector=selector_text,
            )
            continue

        declarations = tuple(_read_declarations(node.content, diagnostics, selector_text))
        if not declarations:
            logger.debug("Rule %r has no supported declarations", selector_text)
            continue
        for selector in selectors:
            rules.append(
                Rule(
                    selector=selector,
                    declarations=declarations,
                    line=node.source_line,
                    column=node.source_column,
                )
            )

    return Stylesheet(rules=tuple(rules), diagnostics=tuple(diagnostics))
