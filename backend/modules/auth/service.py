"""
Authentication service implementation.

Issues opaque session tokens on login and resolves bearer tokens back to
users by looking the session up in the store. Tokens carry no structure;
revoking a session takes effect on the next request.
"""

import asyncio
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from shared.exceptions import ValidationError

from .interfaces import IAuthRepository, IAuthService
from .models import AuthContext, ClientInfo, LoginResult, NewSession, Session
from .exceptions import (
    InvalidCredentialsError,
    InvalidSessionError,
    MissingTokenError,
)
from .passwords import burn_password_check, verify_password

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_session_token() -> str:
    """Return a new random opaque token (UUID4, from os.urandom)."""
    return str(uuid.uuid4())


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Every authenticate() call costs one store query; nothing is cached
    between requests. Store and bcrypt calls run in a worker thread.
    """

    def __init__(
        self,
        repository: IAuthRepository,
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._session_ttl = session_ttl
        self._clock = clock

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
        device_id: Optional[str] = None,
        client: Optional[ClientInfo] = None,
    ) -> LoginResult:
        """
        Verify credentials and issue a new session.

        Unknown email and wrong password raise the same error, after the
        same amount of hashing work.
        """
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required")

        user = await asyncio.to_thread(self._repository.find_user_by_email, email.strip())
        if user is None:
            await asyncio.to_thread(burn_password_check, password)
            logger.info("Login rejected")
            raise InvalidCredentialsError()

        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            logger.info("Login rejected")
            raise InvalidCredentialsError()

        client = client or ClientInfo()
        token = generate_session_token()
        session = await asyncio.to_thread(
            self._repository.insert_session,
            NewSession(
                user_id=user.id,
                session_token=token,
                device_id=device_id or None,
                ip_address=client.ip_address,
                user_agent=client.user_agent,
                expires_at=self._clock() + self._session_ttl,
                is_active=True,
            ),
        )

        logger.info("Session %s issued for user %s", session.id, user.id)
        return LoginResult(token=token, user=user.to_profile(), session=session)

    async def authenticate(self, token: Optional[str]) -> AuthContext:
        """
        Resolve a bearer token to its user and session.

        The session must be active and unexpired. Session state is not
        touched.
        """
        if not token:
            raise MissingTokenError()

        found = await asyncio.to_thread(self._repository.find_active_session_by_token, token)
        if found is None:
            raise InvalidSessionError()

        session, user = found
        if not session.is_active or session.is_expired(self._clock()):
            raise InvalidSessionError()

        return AuthContext(user=user.to_authenticated(), session=session)

    async def logout(self, session: Session) -> None:
        await asyncio.to_thread(self._repository.deactivate_session, session.id)
        logger.info("Session %s deactivated", session.id)

    async def revoke_all_sessions(self, user_id: str) -> int:
        count = await asyncio.to_thread(self._repository.deactivate_user_sessions, user_id)
        logger.info("Deactivated %d session(s) for user %s", count, user_id)
        return count
