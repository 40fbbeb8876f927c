"""Target tags: the id and classes a host attaches to each stylable entity."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

__all__ = ["TargetTag"]

logger = logging.getLogger(__name__)


def _check_no_whitespace(value: str, what: str) -> None:
    if any(ch.isspace() for ch in value):
        raise ValueError(f"A CSS {what} cannot contain whitespace: {value!r}")


@dataclass(frozen=True)
class TargetTag:
    """The id and class set selectors are matched against.

    An entity without a tag is never styled. A tag with neither id nor
    classes is still matched by the universal selector.
    """

    id: str | None = None
    classes: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.id is not None:
            _check_no_whitespace(self.id, "id")
            if not self.id:
                object.__setattr__(self, "id", None)
        if not isinstance(self.classes, frozenset):
            object.__setattr__(self, "classes", frozenset(self.classes))
        for cls in self.classes:
            _check_no_whitespace(cls, "class")

    @classmethod
    def from_classes(cls, classes: str, id: str | None = None) -> TargetTag:
        """Build a tag from a whitespace-separated class string.

        ``"a class"`` yields the two classes ``a`` and ``class``.
        """
        if not classes:
            logger.debug("Empty class string supplied for target tag")
        return cls(id=id or None, classes=frozenset(classes.split()))

    @classmethod
    def parse(cls, text: str) -> TargetTag:
        """Build a tag from selector-style text such as ``#id.class1.class2``.

        ``#`` starts the id (only the last id given is kept) and ``.`` starts a
        class. Leading text before the first ``#`` or ``.`` is ignored with a
        warning.
        """
        if not text:
            logger.debug("Empty selector string supplied for target tag")
        tag_id = ""
        classes: list[str] = []
        mode = ""
        warned = False
        for ch in text:
            if ch == "#":
                mode = "id"
                tag_id = ""
            elif ch == ".":
                mode = "class"
                classes.append("")
            elif mode == "id":
                tag_id += ch
            elif mode == "class":
                classes[-1] += ch
            elif not warned:
                logger.warning(
                    "Tag string %r does not start with '#' (id) or '.' (class)", text
                )
                warned = True
        return cls(id=tag_id or None, classes=frozenset(c for c in classes if c))

    def __str__(self) -> str:
        parts = [f"#{self.id}"] if self.id else []
        parts.extend(f".{c}" for c in sorted(self.classes))
        return "".join(parts)
