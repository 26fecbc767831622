"""Login session endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from users_service.core.dependencies import get_db, get_session_manager
from users_service.schemas.auth import CredentialsRequest
from users_service.schemas.session import SessionRead
from users_service.services.sessions import SessionManager

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionRead)
async def create_session(
    payload: CredentialsRequest | None = None,
    session: AsyncSession = Depends(get_db),
    manager: SessionManager = Depends(get_session_manager),
) -> SessionRead:
    credentials = payload or CredentialsRequest()
    user_session = await manager.create_session(credentials.username, credentials.password)
    await session.commit()
    return user_session


@router.get("/{session_id}", response_model=SessionRead)
async def get_session(
    session_id: str,
    manager: SessionManager = Depends(get_session_manager),
) -> SessionRead:
    return await manager.get_session(session_id)


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    session: AsyncSession = Depends(get_db),
    manager: SessionManager = Depends(get_session_manager),
) -> Response:
    await manager.delete_session(session_id)
    await session.commit()
    return Response(status_code=status.HTTP_200_OK)
