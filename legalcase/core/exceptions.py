"""
Application exception hierarchy.

Validation failures derive from ``InvalidArgumentError`` and are meant to be
shown to the user as-is. Store failures are wrapped into ``StorageError`` at
the service boundary and shown as a generic message.
"""

from typing import Any, Dict, Optional


GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(AppError, ValueError):
    """Bad input or business-rule violation."""
    def __init__(self, message: str = "Invalid argument", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class EntityNotFoundException(InvalidArgumentError):
    """A referenced entity does not exist."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class BusinessRuleViolationException(InvalidArgumentError):
    """Business logic violation error."""
    def __init__(self, message: str = "Business rule violation", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class StorageError(AppError, RuntimeError):
    """The underlying store failed; never retried."""
    def __init__(self, message: str = "Storage failure", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnauthorizedException(AppError, RuntimeError):
    """No user is logged in; an illegal state for session-bound operations."""
    def __init__(self, message: str = "No user is currently logged in", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


def describe_error(exc: Exception) -> str:
    """Turn an exception into the line shown to the user."""
    if isinstance(exc, (InvalidArgumentError, UnauthorizedException)):
        return exc.message
    if isinstance(exc, StorageError):
        return f"{exc.message}. {GENERIC_ERROR_MESSAGE}"
    return GENERIC_ERROR_MESSAGE
