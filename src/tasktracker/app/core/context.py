"""Request-scoped context helpers."""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

_request_id_ctx_var: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)


def new_request_id() -> str:
    """Generate a fresh correlation identifier."""

    return uuid.uuid4().hex


def get_request_id() -> str:
    """Return the request identifier bound to the current execution context."""

    return _request_id_ctx_var.get()


def bind_request_id(request_id: str) -> Token[str]:
    return _request_id_ctx_var.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id_ctx_var.reset(token)


__all__ = [
    "NO_REQUEST_ID",
    "REQUEST_ID_HEADER",
    "bind_request_id",
    "get_request_id",
    "new_request_id",
    "reset_request_id",
]
