"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidInputError(ValidationError):
    """A numeric input to the pricing or fulfillment engine is out of range.

    Carries the offending ``field`` and, for per-line inputs, the
    zero-based ``line_index`` so the caller can point the operator at the
    exact cell of the form.
    """

    def __init__(self, field: str, reason: str, line_index: int | None = None) -> None:
        self.field = field
        self.reason = reason
        self.line_index = line_index
        if line_index is None:
            message = f"Invalid {field}: {reason}"
        else:
            message = f"Invalid {field} on line {line_index}: {reason}"
        super().__init__(message)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
