"""Persistence of user records."""
from __future__ import annotations

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only

from users_service.models.user import User

from .base import store_errors


class UserStore(Protocol):
    async def find_credentials(self, username: str) -> User | None: ...
    async def find_by_id(self, user_id: str) -> User | None: ...
    async def add(self, user: User) -> User: ...


class SqlAlchemyUserStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_credentials(self, username: str) -> User | None:
        """Look up a user by exact username, loading only the id and hash."""
        with store_errors("user lookup"):
            result = await self._session.execute(
                select(User).options(load_only(User.id, User.password_hash)).where(User.username == username)
            )
            return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str) -> User | None:
        with store_errors("user lookup"):
            return await self._session.get(User, user_id)

    async def add(self, user: User) -> User:
        with store_errors("user insert"):
            self._session.add(user)
            await self._session.flush()
        return user
