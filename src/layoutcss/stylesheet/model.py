"""Stylesheet model: SimpleSelector, Declaration, Rule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import tinycss2

from layoutcss.model.diagnostic import Diagnostic
from layoutcss.model.properties import PropertyName


@dataclass(frozen=True)
class SimpleSelector:
    """An id/class selector with no hierarchy or combinators.

    The empty selector (no id, no classes) is the universal selector ``*``
    and matches every target.
    """

    id: str | None = None
    classes: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_universal(self) -> bool:
        return self.id is None and not self.classes

    def __str__(self) -> str:
        if self.is_universal:
            return "*"
        parts = [f"#{self.id}"] if self.id else []
        parts.extend(f".{c}" for c in sorted(self.classes))
        return "".join(parts)


@dataclass(frozen=True)
class Declaration:
    """One ``property: value`` pair with its raw, unresolved component values."""

    property: PropertyName
    value: tuple[Any, ...]  # tinycss2 component values
    important: bool = False
    line: int | None = None
    column: int | None = None

    @property
    def value_text(self) -> str:
        return tinycss2.serialize(self.value).strip()

    def __str__(self) -> str:
        return f"{self.property.value}: {self.value_text}"


@dataclass(frozen=True)
class Rule:
    """A single rule pairing a selector with its declarations in source order."""

    selector: SimpleSelector
    declarations: tuple[Declaration, ...]
    line: int | None = None
    column: int | None = None


@dataclass(frozen=True)
class Stylesheet:
    """The rules read from one stylesheet, in document order.

    ``diagnostics`` records everything that was dropped while reading.
    """

    rules: tuple[Rule, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
