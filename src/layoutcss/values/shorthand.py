"""Expansion of the four-sided shorthands: margin, padding, border-width."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from layoutcss.model.properties import SHORTHAND_SIDES, PropertyName
from layoutcss.values.errors import ResolutionError, ResolutionErrorKind
from layoutcss.values.numeric import significant

__all__ = ["expand", "SIDE_INDEXES"]

# For 1, 2, 3 and 4 given values: which one each of top/right/bottom/left takes.
SIDE_INDEXES: dict[int, tuple[int, int, int, int]] = {
    1: (0, 0, 0, 0),
    2: (0, 1, 0, 1),
    3: (0, 1, 2, 1),
    4: (0, 1, 2, 3),
}


def expand(
    prop: PropertyName, tokens: Iterable[Any]
) -> list[tuple[PropertyName, list[Any]]]:
    """Expand a shorthand into ``(longhand, tokens)`` pairs, top/right/bottom/left.

    Each whitespace-separated component is one side's value. A longhand is
    returned unchanged as a single pair.
    """
    tokens = list(tokens)
    sides = SHORTHAND_SIDES.get(prop)
    if sides is None:
        return [(prop, tokens)]

    groups = significant(tokens)
    if not 1 <= len(groups) <= 4:
        raise ResolutionError(
            ResolutionErrorKind.SHORTHAND_ARITY,
            f"{prop.value} takes 1 to 4 values, got {len(groups)}",
        )
    indexes = SIDE_INDEXES[len(groups)]
    return [(side, [groups[i]]) for side, i in zip(sides, indexes)]
