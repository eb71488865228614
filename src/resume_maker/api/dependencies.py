"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, status

from resume_maker.api.errors import CONTENT_TYPE_MESSAGE, APIError, is_json_content_type


def require_json_content_type(
    content_type: Annotated[str | None, Header(description="Must be application/json")] = None,
) -> None:
    """Reject request bodies that are not declared as JSON.

    Raises:
        APIError: 400 ``BAD_REQUEST`` for a missing or non-JSON Content-Type.
    """
    if not is_json_content_type(content_type):
        raise APIError(status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", CONTENT_TYPE_MESSAGE)
