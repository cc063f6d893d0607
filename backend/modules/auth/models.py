"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class UserRecord(BaseModel):
    """
    A row of the ``users`` table.

    Carries the password hash, so it must never be returned to a client.
    Use ``to_profile()`` or ``to_authenticated()`` for outbound data.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="bcrypt hash of the password")
    full_name: Optional[str] = Field(None, description="Display name")
    subscription_type: Optional[str] = Field(None, description="Subscription tier")

    model_config = {"extra": "ignore"}

    def to_profile(self) -> "UserProfile":
        return UserProfile(
            id=self.id,
            email=self.email,
            full_name=self.full_name,
            subscription_type=self.subscription_type,
        )

    def to_authenticated(self) -> AuthenticatedUser:
        return AuthenticatedUser(
            id=self.id,
            email=self.email,
            full_name=self.full_name,
            subscription_type=self.subscription_type,
        )


class UserProfile(BaseModel):
    """Sanitized user projection returned by login."""

    id: str
    email: str
    full_name: Optional[str] = None
    subscription_type: Optional[str] = None


class ClientInfo(BaseModel):
    """Network metadata of the caller creating a session."""

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class NewSession(BaseModel):
    """Insert payload for the ``user_sessions`` table."""

    user_id: str
    session_token: str
    device_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    expires_at: datetime
    is_active: bool = True

    def to_row(self) -> dict:
        """Serialize for the store (timestamps as ISO-8601)."""
        row = self.model_dump()
        row["expires_at"] = self.expires_at.isoformat()
        return row


class Session(BaseModel):
    """
    One authenticated device/browser instance.

    Invalidated by flipping ``is_active`` or by passing ``expires_at``;
    never deleted by this service.
    """

    id: str
    user_id: str
    session_token: str
    device_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: Optional[datetime] = None
    expires_at: datetime
    is_active: bool = True

    model_config = {"extra": "ignore"}

    def is_expired(self, now: datetime) -> bool:
        """Whether the session is past its expiry at ``now``."""
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            # timestamp columns without zone are stored in UTC
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= now


class AuthContext(BaseModel):
    """Identity resolved from a bearer token."""

    user: AuthenticatedUser
    session: Session


class LoginResult(BaseModel):
    """Outcome of a successful login."""

    token: str
    user: UserProfile
    session: Session


class LoginRequest(BaseModel):
    """
    Body of POST /api/login.

    Fields are optional at the schema level so that missing credentials
    surface as the service's ValidationError rather than a schema error.
    """

    email: Optional[str] = None
    password: Optional[str] = None
    device_id: Optional[str] = None


class LoginResponse(BaseModel):
    """Body returned by POST /api/login."""

    success: bool = True
    token: str
    user: UserProfile


class LogoutResponse(BaseModel):
    """Body returned by the logout endpoints."""

    success: bool = True
    revoked: int = Field(1, description="Number of sessions deactivated")
