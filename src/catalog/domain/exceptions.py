"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the transport layer can catch them uniformly and display user-friendly
messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller-supplied data violates a field constraint.

    ``errors`` carries one message per failing field when a request was
    validated as a whole; a single-field failure leaves it holding just the
    main message.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class InvalidOperationError(DomainException):
    """The operation is not allowed given the aggregate's current state."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""
