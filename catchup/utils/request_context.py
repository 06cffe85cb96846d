"""Request-scoped identifier shared by middleware, handlers and log records.

The middleware in :mod:`catchup.main` stores one identifier per inbound request
(echoing ``X-Request-ID`` when the caller supplies one).  Error payloads and
log lines read it back through :func:`get_request_id`.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

__all__ = [
    "REQUEST_ID_CONTEXT",
    "REQUEST_ID_HEADER",
    "clear_request_id",
    "get_request_id",
    "new_request_id",
    "set_request_id",
]

REQUEST_ID_HEADER = "X-Request-ID"

REQUEST_ID_CONTEXT: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id(incoming: str | None = None) -> str:
    """Return ``incoming`` when it is a usable identifier, otherwise a fresh UUID4."""

    if incoming is not None:
        candidate = incoming.strip()
        if candidate and len(candidate) <= 128:
            return candidate
    return str(uuid.uuid4())


def set_request_id(request_id: str) -> Token[str]:
    """Persist ``request_id`` for the active task; the token allows a later reset."""

    return REQUEST_ID_CONTEXT.set(request_id)


def get_request_id() -> str:
    """Return the current request identifier, or an empty string outside a request."""

    return REQUEST_ID_CONTEXT.get()


def clear_request_id(token: Token[str] | None = None) -> None:
    if token is not None:
        REQUEST_ID_CONTEXT.reset(token)
    else:
        REQUEST_ID_CONTEXT.set("")
