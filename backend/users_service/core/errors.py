"""Error kinds raised by the managers and stores."""
from __future__ import annotations

from http import HTTPStatus
from typing import Any


class ServiceError(Exception):
    """Base class for every error rendered by the HTTP error handler."""

    code = "service_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message}


class ValidationError(ServiceError):
    code = "invalid_body"
    status = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str = "Invalid body!") -> None:
        super().__init__(message)


class NotFoundError(ServiceError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND


class AuthenticationError(ServiceError):
    code = "invalid_password"
    status = HTTPStatus.UNAUTHORIZED

    def __init__(self, message: str = "Invalid password!") -> None:
        super().__init__(message)


class StoreError(ServiceError):
    """Persistence failure, including constraint violations."""

    code = "store_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
