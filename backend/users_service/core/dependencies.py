"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from users_service.core.config import Settings, get_settings
from users_service.core.security import PasswordHasher
from users_service.db.session import get_session
from users_service.repositories import SqlAlchemySessionStore, SqlAlchemyUserStore
from users_service.services.sessions import SessionManager
from users_service.services.users import UserManager


async def get_db() -> AsyncIterator[AsyncSession]:
    async with get_session() as session:
        yield session


async def get_user_manager(session: AsyncSession = Depends(get_db)) -> UserManager:
    return UserManager(users=SqlAlchemyUserStore(session), password_hasher=PasswordHasher())


async def get_session_manager(
    session: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SessionManager:
    return SessionManager(
        sessions=SqlAlchemySessionStore(session),
        users=SqlAlchemyUserStore(session),
        password_hasher=PasswordHasher(),
        expiry_hours=settings.user_session_expiry_hours,
    )
