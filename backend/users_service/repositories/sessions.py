"""Persistence of login sessions."""
from __future__ import annotations

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from users_service.models.session import UserSession

from .base import store_errors


class SessionStore(Protocol):
    async def find_by_id(self, session_id: str) -> UserSession | None: ...
    async def add(self, user_session: UserSession) -> UserSession: ...
    async def remove(self, user_session: UserSession) -> None: ...


class SqlAlchemySessionStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, session_id: str) -> UserSession | None:
        with store_errors("session lookup"):
            return await self._session.get(UserSession, session_id)

    async def add(self, user_session: UserSession) -> UserSession:
        with store_errors("session insert"):
            self._session.add(user_session)
            await self._session.flush()
        return user_session

    async def remove(self, user_session: UserSession) -> None:
        with store_errors("session delete"):
            await self._session.delete(user_session)
            await self._session.flush()
