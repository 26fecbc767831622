"""Request body shared by signup and login."""
from __future__ import annotations

from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    # Both optional so that missing fields reach the managers as validation errors.
    username: str | None = None
    password: str | None = None
