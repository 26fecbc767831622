"""User account endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from users_service.core.dependencies import get_db, get_user_manager
from users_service.schemas.auth import CredentialsRequest
from users_service.schemas.user import UserPublic, UserRead
from users_service.services.users import UserManager

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserPublic)
async def create_user(
    payload: CredentialsRequest | None = None,
    session: AsyncSession = Depends(get_db),
    manager: UserManager = Depends(get_user_manager),
) -> UserPublic:
    credentials = payload or CredentialsRequest()
    user = await manager.create_user(credentials.username, credentials.password)
    await session.commit()
    return user


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: str,
    manager: UserManager = Depends(get_user_manager),
) -> UserRead:
    return await manager.get_user(user_id)
