"""Application-level exception handling helpers.

Every error leaves the service as an ``ErrorResponse`` body
(``timestamp``/``status``/``error``/``message``/``path``). Missing records map
to 404; database failures and anything unexpected map to 500 with the
underlying message passed through unchanged.
"""

from __future__ import annotations

import logging
from contextvars import Token
from http import HTTPStatus
from typing import Any, Mapping, TypeVar

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import REQUEST_ID_HEADER, bind_request_id, reset_request_id
from .models import utcnow
from .results import NotFound
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(ApplicationError):
    """Error representing a missing record of a given kind."""

    def __init__(self, kind: str, entity_id: int) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(
            NotFound(kind=kind, id=entity_id).message,
            status_code=status.HTTP_404_NOT_FOUND,
        )

    @classmethod
    def from_result(cls, result: NotFound) -> "NotFoundError":
        return cls(result.kind, result.id)


def unwrap(result: T | NotFound) -> T:
    """Return ``result`` unless it is a ``NotFound``, which is raised instead."""

    if isinstance(result, NotFound):
        raise NotFoundError.from_result(result)
    return result


def _bind_request_context(request: Request) -> Token[str] | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        return None
    return bind_request_id(request_id)


def _reset_request_context(token: Token[str] | None) -> None:
    if token is not None:
        reset_request_id(token)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _error_response(
    request: Request,
    *,
    status_code: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(
        timestamp=utcnow(),
        status=status_code,
        error=_reason_phrase(status_code),
        message=message,
        path=request.url.path,
    )
    response = JSONResponse(status_code=status_code, content=jsonable_encoder(payload))
    if headers:
        response.headers.update(headers)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _validation_message(errors: list[dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Request validation failed."


def _underlying_message(exc: SQLAlchemyError) -> str:
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the provided FastAPI app."""

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "Application error encountered",
                extra={"status_code": exc.status_code, "error_message": exc.message},
            )
            return _error_response(request, status_code=exc.status_code, message=exc.message)
        finally:
            _reset_request_context(token)

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.warning("Request validation failed", extra={"errors": exc.errors()})
            return _error_response(
                request,
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                message=_validation_message(list(exc.errors())),
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(SQLAlchemyError)
    async def _handle_database_error(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.error("Database error encountered.", exc_info=exc)
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=_underlying_message(exc),
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "HTTP exception raised",
                extra={"status_code": exc.status_code, "path": str(request.url.path)},
            )
            message = exc.detail if isinstance(exc.detail, str) else _reason_phrase(exc.status_code)
            return _error_response(
                request,
                status_code=exc.status_code,
                message=message,
                headers=exc.headers or None,
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.exception("Unhandled application error.")
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=str(exc),
            )
        finally:
            _reset_request_context(token)


__all__ = [
    "ApplicationError",
    "NotFoundError",
    "register_exception_handlers",
    "unwrap",
]
