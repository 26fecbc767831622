"""Rendering of error kinds into JSON responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from users_service.core.errors import ServiceError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def _render(exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def _service_error(request: Request, exc: ServiceError) -> JSONResponse:
        if isinstance(exc, StoreError):
            logger.error("%s %s: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return _render(exc)

    @app.exception_handler(SQLAlchemyError)
    async def _store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        # Failures raised outside the stores, e.g. at commit time.
        logger.error("%s %s: store failure", request.method, request.url.path, exc_info=exc)
        return _render(StoreError(f"commit failed ({exc.__class__.__name__})"))

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _render(ValidationError())
