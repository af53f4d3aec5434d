"""Response envelope shared by every transport.

A Result carries a success flag, optional data, an optional single error
message and an optional list of field-level error messages.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Callable

from catalog.domain.exceptions import DomainException, ValidationError


@dataclass(frozen=True)
class Result:

    is_success: bool
    data: Any = None
    error: str | None = None
    errors: list[str] = field(default_factory=list)

    @staticmethod
    def success(data: Any = None) -> Result:
        return Result(is_success=True, data=data)

    @staticmethod
    def failure(error: str | None = None, errors: list[str] | None = None) -> Result:
        return Result(is_success=False, error=error, errors=list(errors or []))

    @staticmethod
    def from_exception(exc: Exception) -> Result:
        """Wrap a domain error in a failure envelope.

        Anything that is not a DomainException is re-raised unchanged; the
        core does not interpret infrastructure failures.
        """
        if isinstance(exc, ValidationError):
            return Result.failure(str(exc), exc.errors)
        if isinstance(exc, DomainException):
            return Result.failure(str(exc))
        raise exc

    @staticmethod
    def capture(fn: Callable[[], Any]) -> Result:
        """Run *fn* and wrap its return value or domain error."""
        try:
            return Result.success(fn())
        except DomainException as exc:
            return Result.from_exception(exc)

    def to_dict(self) -> dict:
        data = self.data
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        elif is_dataclass(data) and not isinstance(data, type):
            data = asdict(data)
        return {
            "is_success": self.is_success,
            "data": data,
            "error": self.error,
            "errors": list(self.errors),
        }
