"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers. Messages are deliberately generic: callers cannot tell
an unknown email from a wrong password, or a foreign token from an
expired one.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials do not match a user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Access token required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidSessionError(AuthorizationError):
    """Raised when a token does not resolve to an active, unexpired session."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")
