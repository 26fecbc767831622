"""Session manager: login, login check and logout."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from users_service.core.errors import AuthenticationError, NotFoundError, ValidationError
from users_service.core.security import generate_uuid
from users_service.models.session import UserSession
from users_service.repositories.sessions import SessionStore
from users_service.repositories.users import UserStore
from users_service.schemas.session import SessionRead
from users_service.services.users import CredentialHasher

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionManager:
    """Create, look up and delete login sessions.

    Sessions carry an ``expires_at`` computed once at creation. Nothing here
    rejects or purges expired sessions; callers compare ``expires_at`` to the
    current time themselves.
    """

    def __init__(
        self,
        *,
        sessions: SessionStore,
        users: UserStore,
        password_hasher: CredentialHasher,
        expiry_hours: int,
        id_factory: Callable[[], str] = generate_uuid,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._sessions = sessions
        self._users = users
        self._password_hasher = password_hasher
        self._expiry_hours = expiry_hours
        self._id_factory = id_factory
        self._clock = clock

    async def create_session(self, username: str | None, password: str | None) -> SessionRead:
        if not username or not password:
            raise ValidationError()

        user = await self._users.find_credentials(username)
        if user is None:
            logger.warning("Login attempt for unknown username %s", username)
            raise NotFoundError("Invalid username!")

        if not self._password_hasher.verify(password, user.password_hash):
            logger.warning("Login attempt with invalid password for %s", username)
            raise AuthenticationError()

        user_session = UserSession(
            id=self._id_factory(),
            user_id=user.id,
            expires_at=self._clock() + timedelta(hours=self._expiry_hours),
        )
        await self._sessions.add(user_session)
        logger.info("Created session %s for user %s", user_session.id, user_session.user_id)
        return SessionRead.model_validate(user_session)

    async def get_session(self, session_id: str) -> SessionRead:
        user_session = await self._require(session_id)
        return SessionRead.model_validate(user_session)

    async def delete_session(self, session_id: str) -> None:
        user_session = await self._require(session_id)
        await self._sessions.remove(user_session)
        logger.info("Deleted session %s", session_id)

    async def _require(self, session_id: str) -> UserSession:
        user_session = await self._sessions.find_by_id(session_id)
        if user_session is None:
            logger.debug("Session %s not found", session_id)
            raise NotFoundError("Invalid session ID!")
        return user_session
