"""
Authentication module interfaces.

Other modules should depend on IAuthService, not the concrete implementation.
The service itself depends on IAuthRepository, so it can run against the
Supabase store or the in-memory fake.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    AuthContext,
    ClientInfo,
    LoginResult,
    NewSession,
    Session,
    UserRecord,
)


@runtime_checkable
class IAuthRepository(Protocol):
    """Store operations needed to issue and resolve sessions."""

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the single user with this email, or None."""
        ...

    def insert_session(self, session: NewSession) -> Session:
        """
        Persist a new session row.

        Raises:
            StorageError: If the write fails (including a token collision)
        """
        ...

    def find_active_session_by_token(
        self, token: str
    ) -> Optional[tuple[Session, UserRecord]]:
        """
        Look up an active session by exact token, joined to its owner.

        Expiry is not checked here; that is the service's job.
        """
        ...

    def deactivate_session(self, session_id: str) -> None:
        """Set is_active to false on one session."""
        ...

    def deactivate_user_sessions(self, user_id: str) -> int:
        """Set is_active to false on every active session of a user."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
        device_id: Optional[str] = None,
        client: Optional[ClientInfo] = None,
    ) -> LoginResult:
        """
        Verify credentials and issue a new session.

        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If the user is unknown or the password is wrong
            StorageError: If the session could not be written
        """
        ...

    async def authenticate(self, token: Optional[str]) -> AuthContext:
        """
        Resolve a bearer token to its user and session.

        Raises:
            MissingTokenError: If no token was supplied
            InvalidSessionError: If the session is unknown, inactive or expired
        """
        ...

    async def logout(self, session: Session) -> None:
        """Deactivate one session."""
        ...

    async def revoke_all_sessions(self, user_id: str) -> int:
        """Deactivate every active session of a user and return how many."""
        ...
