"""Pydantic schemas for login sessions."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class SessionRead(BaseModel):
    id: str
    user_id: str
    expires_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("expires_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
