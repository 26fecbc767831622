"""Password hashing and identifier generation helpers."""
from __future__ import annotations

import uuid

from passlib.context import CryptContext


_password_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        return _password_context.hash(password)

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        return _password_context.verify(password, hashed)


def generate_uuid() -> str:
    return str(uuid.uuid4())
