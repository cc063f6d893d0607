"""
Authentication module.

Handles login, opaque session tokens and session resolution.

Public API:
- IAuthService: Interface for auth operations
- IAuthRepository: Store operations the service depends on
- AuthContext: User and session resolved from a bearer token
- UserProfile: Sanitized user returned by login
- Auth exceptions: InvalidCredentialsError, MissingTokenError, InvalidSessionError
"""

from .interfaces import IAuthService, IAuthRepository
from .models import AuthContext, ClientInfo, LoginResult, Session, UserProfile, UserRecord
from .exceptions import (
    InvalidCredentialsError,
    MissingTokenError,
    InvalidSessionError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IAuthRepository",
    # Models
    "AuthContext",
    "ClientInfo",
    "LoginResult",
    "Session",
    "UserProfile",
    "UserRecord",
    # Exceptions
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidSessionError",
]
