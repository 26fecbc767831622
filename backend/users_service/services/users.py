"""User manager: signup and lookup of user records."""
from __future__ import annotations

import logging
from typing import Callable, Protocol

from users_service.core.errors import NotFoundError, ValidationError
from users_service.core.security import generate_uuid
from users_service.models.user import User
from users_service.repositories.users import UserStore
from users_service.schemas.user import UserPublic, UserRead

logger = logging.getLogger(__name__)


class CredentialHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class UserManager:
    def __init__(
        self,
        *,
        users: UserStore,
        password_hasher: CredentialHasher,
        id_factory: Callable[[], str] = generate_uuid,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._id_factory = id_factory

    async def create_user(self, username: str | None, password: str | None) -> UserPublic:
        """Persist a new user and return it without the password hash.

        Username uniqueness is left to the store's constraint; a duplicate
        surfaces as StoreError.
        """
        if not username or not password:
            raise ValidationError()

        user = User(
            id=self._id_factory(),
            username=username,
            password_hash=self._password_hasher.hash(password),
        )
        await self._users.add(user)
        logger.info("Created user %s (%s)", user.id, user.username)
        return UserPublic.model_validate(user)

    async def get_user(self, user_id: str) -> UserRead:
        # Returns the stored record as-is, hash included.
        user = await self._users.find_by_id(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            raise NotFoundError("Invalid User ID!")
        return UserRead.model_validate(user)
