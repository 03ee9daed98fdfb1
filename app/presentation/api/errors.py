"""Uniform JSON error envelope and domain-failure → HTTP mapping.

Every error response has the shape::

    {"error": {"code": 400, "message": "Invalid JSON format"}}

``message`` is a plain string, or for validation failures a mapping of
field path → list of messages.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.application.schemas import ErrorDetail, ErrorResponse
from app.domain.result import ErrorKind, ServiceError

logger = logging.getLogger(__name__)

INVALID_JSON = "Invalid JSON format"

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PERSISTENCE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

# Request sections FastAPI prefixes onto error locations
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}

ErrorMessage = str | ServiceError | ValidationError | Sequence[dict[str, Any]]


def decorate_error(status_code: int, message: ErrorMessage) -> dict[str, Any]:
    """Wrap a status code and a message or validation result in the error envelope."""
    envelope = ErrorResponse(
        error=ErrorDetail(code=status_code, message=_format_message(message))
    )
    return envelope.model_dump()


def error_response(status_code: int, message: ErrorMessage) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=decorate_error(status_code, message))


def failure_response(error: ServiceError) -> JSONResponse:
    """Render a service failure with the status code for its kind."""
    return error_response(_STATUS_BY_KIND[error.kind], error)


def register_error_handlers(app: FastAPI) -> None:
    """Render framework request-validation errors with the same envelope."""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug("Request validation failed: %s", exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, list(exc.errors()))


def _format_message(message: ErrorMessage) -> str | dict[str, list[str]]:
    if isinstance(message, ServiceError):
        return _format_errors(message.details) if message.details else message.message
    if isinstance(message, ValidationError):
        return _format_errors(message.errors(include_url=False))
    if isinstance(message, str):
        return message
    return _format_errors(message)


def _format_errors(errors: Sequence[dict[str, Any]]) -> dict[str, list[str]]:
    formatted: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_ROOTS:
            loc = loc[1:]
        field = ".".join(loc) or "request"
        formatted.setdefault(field, []).append(str(error.get("msg", "Invalid value")))
    return formatted
