"""
Error taxonomy shared by usecases, storage adapters and the HTTP layer.

Every failure leaving the core is one of four kinds. Callers branch on the
exception class (or its `kind`), never on the message text.
"""
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    VALIDATION = "validation_error"
    UNAVAILABLE = "unavailable"


class ComparisonCenterError(Exception):
    """Base exception for all comparison center errors."""

    kind: ErrorKind = ErrorKind.UNAVAILABLE

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def with_context(self, context: str) -> "ComparisonCenterError":
        """Return an error of the same kind with `context` prepended to the message."""
        return type(self)(f"{context} - {self.message}", details=self.details)


class NotFoundError(ComparisonCenterError):
    """Raised when the requested entity id does not exist."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(ComparisonCenterError):
    """Raised when a uniqueness constraint is violated."""

    kind = ErrorKind.ALREADY_EXISTS


class ValidationError(ComparisonCenterError):
    """Raised when filter or field constraints are violated before storage is reached."""

    kind = ErrorKind.VALIDATION


class UnavailableError(ComparisonCenterError):
    """Raised for any other storage or infrastructure failure."""

    kind = ErrorKind.UNAVAILABLE


@contextmanager
def wrap_errors(context: str) -> Iterator[None]:
    """
    Re-raise comparison center errors with the operation context prepended.

    Usage:
        with wrap_errors("failed to get comparison"):
            comparison = await self.repo.get_by_id(comparison_id)
    """
    try:
        yield
    except ComparisonCenterError as e:
        raise e.with_context(context) from e
