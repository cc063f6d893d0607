"""
Auth repositories.

Encapsulates all Supabase queries and data mapping for the auth tables:
- users
- user_sessions

InMemoryAuthRepository implements the same interface over dicts for
tests and local development.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional, Any

from shared.exceptions import StorageError
from shared.repository import BaseRepository
from .models import NewSession, Session, UserRecord

USERS_TABLE = "users"
SESSIONS_TABLE = "user_sessions"


class SupabaseAuthRepository(BaseRepository[Session]):
    """
    Repository for users and sessions in Supabase.

    Note: This repository does NOT check session expiry.
    The service layer is responsible for that.
    """

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._execute(
            self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1),
            "find_user_by_email",
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def insert_session(self, session: NewSession) -> Session:
        result = self._execute(
            self._db.table(SESSIONS_TABLE).insert(session.to_row()),
            "insert_session",
        )
        if not result.data:
            raise StorageError("insert_session", details={"reason": "no row returned"})
        return self._map_to_session(result.data[0])

    def find_active_session_by_token(
        self, token: str
    ) -> Optional[tuple[Session, UserRecord]]:
        result = self._execute(
            self._db.table(SESSIONS_TABLE)
            .select("*, users(*)")
            .eq("session_token", token)
            .eq("is_active", True)
            .limit(1),
            "find_active_session_by_token",
        )
        if not result.data:
            return None

        row = result.data[0]
        user_data = row.get("users")
        if not user_data:
            # session whose owner no longer exists
            return None
        return self._map_to_session(row), self._map_to_user(user_data)

    def deactivate_session(self, session_id: str) -> None:
        self._execute(
            self._db.table(SESSIONS_TABLE).update({"is_active": False}).eq("id", session_id),
            "deactivate_session",
        )

    def deactivate_user_sessions(self, user_id: str) -> int:
        result = self._execute(
            self._db.table(SESSIONS_TABLE)
            .update({"is_active": False})
            .eq("user_id", user_id)
            .eq("is_active", True),
            "deactivate_user_sessions",
        )
        return len(result.data or [])

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data.get("password_hash") or "",
            full_name=data.get("full_name"),
            subscription_type=data.get("subscription_type"),
        )

    def _map_to_session(self, data: dict[str, Any]) -> Session:
        """Map database row to Session model."""
        return Session(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            session_token=data["session_token"],
            device_id=data.get("device_id"),
            ip_address=data.get("ip_address"),
            user_agent=data.get("user_agent"),
            created_at=data.get("created_at"),
            expires_at=data["expires_at"],
            is_active=data.get("is_active", True),
        )


class InMemoryAuthRepository:
    """
    Dict-backed auth repository.

    Enforces token uniqueness the way the store's unique constraint does.
    Reads iterate over snapshots since services call in from worker threads.
    """

    def __init__(self, users: Optional[list[UserRecord]] = None) -> None:
        self._users: dict[str, UserRecord] = {}
        self._sessions: dict[str, Session] = {}
        for user in users or []:
            self.add_user(user)

    def add_user(self, user: UserRecord) -> UserRecord:
        self._users[user.id] = user
        return user

    def get_session(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def update_session(self, session_id: str, **changes: Any) -> Session:
        """Overwrite session fields (tests use this to age or flip sessions)."""
        session = self._sessions[session_id].model_copy(update=changes)
        self._sessions[session_id] = session
        return session

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        for user in list(self._users.values()):
            if user.email == email:
                return user
        return None

    def insert_session(self, session: NewSession) -> Session:
        if any(s.session_token == session.session_token for s in list(self._sessions.values())):
            raise StorageError("insert_session", details={"reason": "duplicate session_token"})
        if session.user_id not in self._users:
            raise StorageError("insert_session", details={"reason": "unknown user_id"})

        stored = Session(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **session.model_dump(),
        )
        self._sessions[stored.id] = stored
        return stored

    def find_active_session_by_token(
        self, token: str
    ) -> Optional[tuple[Session, UserRecord]]:
        for session in list(self._sessions.values()):
            if session.session_token == token and session.is_active:
                user = self._users.get(session.user_id)
                if user is None:
                    return None
                return session, user
        return None

    def deactivate_session(self, session_id: str) -> None:
        if session_id in self._sessions:
            self.update_session(session_id, is_active=False)

    def deactivate_user_sessions(self, user_id: str) -> int:
        targets = [
            s.id for s in list(self._sessions.values())
            if s.user_id == user_id and s.is_active
        ]
        for session_id in targets:
            self.update_session(session_id, is_active=False)
        return len(targets)
