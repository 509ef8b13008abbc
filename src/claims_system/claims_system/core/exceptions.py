from __future__ import annotations

from typing import Optional

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""

    def __init__(self, message: str, *, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.code = code


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(ValidationError):
    """Raised when the login form does not pass the identity check."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
