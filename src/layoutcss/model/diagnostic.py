"""Diagnostic model: structured messages about stylesheet reading and resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a stylesheet or declaration block.

    Nothing reported here is fatal: the offending rule or declaration has
    already been dropped and the rest of the input still applies.

    Attributes:
        code: Short identifier for the kind of problem (e.g. ``invalid_selector``).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        line: 1-based source line, if known.
        column: 1-based source column, if known.
        property: The CSS property name involved, if applicable.
        selector: The selector text involved, if applicable.
    """

    # Declared before the fields: the ``property`` field shadows the builtin
    # in the class body from its line onwards.
    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    code: str
    severity: Severity
    message: str
    line: int | None = None
    column: int | None = None
    property: str | None = None
    selector: str | None = None

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [line {self.line}, col {self.column}]"
        if self.property:
            location += f" [property={self.property}]"
        elif self.selector:
            location += f" [selector={self.selector}]"
        return f"{self.severity.value}{location}: {self.message}"
