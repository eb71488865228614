"""API error type and the handlers that render it as ``{"error": {...}}``."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_maker.api.schemas.common import ErrorBody, ErrorDetail, ErrorResponse
from resume_maker.services.validation import ValidationErrorDetail

logger = logging.getLogger(__name__)

CONTENT_TYPE_MESSAGE = "Content-Type must be application/json"
MALFORMED_BODY_MESSAGE = "Malformed JSON body"


class APIError(Exception):
    """An error with a fixed HTTP status and machine-readable code."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Sequence[ValidationErrorDetail | ErrorDetail] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = list(details or [])


def is_json_content_type(value: str | None) -> bool:
    return "application/json" in (value or "").lower()


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Sequence[ValidationErrorDetail | ErrorDetail] | None = None,
) -> JSONResponse:
    """Build the JSON error envelope; ``details`` is omitted when empty."""
    body = ErrorResponse(
        error=ErrorBody(
            code=code,
            message=message,
            details=[ErrorDetail(field=d.field, message=d.message) for d in details or []]
            or None,
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable or mis-shaped bodies as 400 ``BAD_REQUEST``."""
    if not is_json_content_type(request.headers.get("content-type")):
        return error_response(status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", CONTENT_TYPE_MESSAGE)

    details = [
        ErrorDetail(
            field=".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            message=error.get("msg", ""),
        )
        for error in exc.errors()
        if error.get("type") != "json_invalid"
    ]
    logger.info("Rejected request body for %s: %d problem(s)", request.url.path, len(details))
    return error_response(
        status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", MALFORMED_BODY_MESSAGE, details
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
