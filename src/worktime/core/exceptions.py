from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, details: Sequence[str] | None = None):
        super().__init__(message)
        self.details = list(details or [])


class NotFoundError(DomainError):
    """Raised when a referenced employee or time entry does not exist."""


class AuthenticationError(DomainError):
    """Raised when there is no valid session or login credentials are invalid."""
