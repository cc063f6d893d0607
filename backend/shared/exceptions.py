"""
Base exception classes for the MultiProfile backend.

Each module defines its own exceptions that inherit from these bases.
The API layer maps them to HTTP responses through ``status_code``.
"""

from typing import Optional, Any


class MultiProfileError(Exception):
    """
    Base exception for all MultiProfile errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "success": False,
            "error": self.code,
            "message": self.message,
        }


class ValidationError(MultiProfileError):
    """Input validation failed."""

    status_code = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = "VALIDATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class AuthenticationError(MultiProfileError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(MultiProfileError):
    """The presented credential is not accepted."""

    status_code = 403


class StorageError(MultiProfileError):
    """The relational store failed or could not be reached."""

    status_code = 500

    def __init__(
        self,
        operation: str,
        message: str = "Internal server error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code="STORAGE_ERROR", details=details)
        self.operation = operation
        self.details["operation"] = operation


class ConfigurationError(MultiProfileError):
    """Required configuration is missing; the process must not start."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class UnhandledError(MultiProfileError):
    """Catch-all for failures nothing else claimed."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")
