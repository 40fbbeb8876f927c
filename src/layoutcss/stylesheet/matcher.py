"""Selector matching against target tags."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from layoutcss.model.tag import TargetTag
from layoutcss.stylesheet.model import Rule, SimpleSelector

__all__ = ["matches", "matching_rules"]


def matches(selector: SimpleSelector, tag: TargetTag) -> bool:
    """Check whether *selector* matches *tag*.

    The id must be equal when the selector names one, and every class the
    selector lists must be on the tag; extra classes on the tag are ignored.
    """
    if selector.id is not None and selector.id != tag.id:
        return False
    return selector.classes <= tag.classes


def matching_rules(rules: Iterable[Rule], tag: TargetTag) -> Iterator[Rule]:
    """Yield the rules whose selector matches *tag*, keeping their order."""
    return (rule for rule in rules if matches(rule.selector, tag))
