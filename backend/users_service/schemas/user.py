"""Pydantic schemas for user records."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserPublic(BaseModel):
    """User as returned from signup. Never carries the password hash."""

    id: str
    username: str

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class UserRead(UserPublic):
    """Full stored user record, including the hash."""

    password_hash: str
