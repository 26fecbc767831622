"""API router aggregator."""
from fastapi import APIRouter

from users_service.api.routes import sessions, users

api_router = APIRouter()
api_router.include_router(sessions.router)
api_router.include_router(users.router)

__all__ = ["api_router"]
