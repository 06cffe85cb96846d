"""Helpers for constructing structured API error responses.

Every exception handler funnels through these builders so payloads share one
shape: the request id from :mod:`catchup.utils.request_context`, a UTC
timestamp and the request path.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from typing import Any

from fastapi.responses import JSONResponse

from catchup.schemas.error import (
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from catchup.utils.request_context import get_request_id

__all__ = [
    "build_error_response",
    "build_validation_error_response",
    "to_json_response",
    "validation_details_from_errors",
]


def _current_timestamp() -> datetime:
    """Return a timezone-aware timestamp; tests monkeypatch this for determinism."""

    return datetime.now(UTC)


def validation_details_from_errors(
    errors: Iterable[dict[str, Any]],
) -> list[ValidationErrorDetail]:
    """Flatten pydantic/FastAPI error dictionaries into :class:`ValidationErrorDetail`."""

    return [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error.get("loc", ())),
            message=error.get("msg", ""),
            value=error.get("input"),
        )
        for error in errors
    ]


def build_validation_error_response(
    *,
    errors: Sequence[ValidationErrorDetail],
    message: str,
    detail: str,
    status_code: int,
    path: str,
    request_id: str | None = None,
) -> ValidationErrorResponse:
    """Construct a ``ValidationErrorResponse`` enriched with request metadata."""

    return ValidationErrorResponse(
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=request_id or get_request_id(),
        path=path,
        errors=list(errors),
    )


def build_error_response(
    *,
    error_type: ErrorType,
    message: str,
    detail: str,
    status_code: int,
    path: str,
    retry_after: int | None = None,
    request_id: str | None = None,
) -> ErrorResponse:
    """Construct a generic ``ErrorResponse``; ``retry_after`` is only set for transient failures."""

    return ErrorResponse(
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=request_id or get_request_id(),
        path=path,
        retry_after=retry_after,
    )


def to_json_response(payload: ErrorResponse) -> JSONResponse:
    """Serialize ``payload`` using its own status code, adding ``Retry-After`` when set."""

    headers = None
    if payload.retry_after is not None:
        headers = {"Retry-After": str(payload.retry_after)}
    return JSONResponse(
        status_code=payload.status_code,
        content=payload.model_dump(mode="json"),
        headers=headers,
    )
