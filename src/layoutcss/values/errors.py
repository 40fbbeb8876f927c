"""Value resolution error types."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class ResolutionErrorKind(Enum):
    """Why a declaration's value could not be resolved."""

    UNSUPPORTED_VALUE = "unsupported_value"
    UNKNOWN_PROPERTY = "unknown_property"
    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_DIMENSION = "unexpected_dimension"
    MISSING_DIMENSION = "missing_dimension"
    OUT_OF_RANGE = "out_of_range"
    FUNCTION_NOT_SUPPORTED = "function_not_supported"
    INVALID_COLOR = "invalid_color"
    SHORTHAND_ARITY = "shorthand_arity"


class ResolutionError(Exception):
    """Raised when a value does not satisfy its property's grammar.

    Only the declaration being resolved is affected; callers drop it and
    keep going.
    """

    def __init__(
        self,
        kind: ResolutionErrorKind,
        message: str,
        causes: Sequence[ResolutionError] = (),
    ) -> None:
        self.kind = kind
        self.causes = tuple(causes)
        super().__init__(message)
