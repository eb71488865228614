"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """A problem with one request field."""

    field: str = Field(description="Dotted field path, e.g. data.personalInfo.firstName")
    message: str


class ErrorBody(BaseModel):
    code: str = Field(description="Machine-readable error code, e.g. VALIDATION_ERROR")
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Envelope returned for every non-2xx response."""

    error: ErrorBody
