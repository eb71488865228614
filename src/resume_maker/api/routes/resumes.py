"""Resume rendering routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from resume_maker.api.dependencies import require_json_content_type
from resume_maker.api.errors import APIError
from resume_maker.api.schemas.common import ErrorResponse
from resume_maker.api.schemas.resumes import GeneratePDFRequest
from resume_maker.pdf.backend import BackendError
from resume_maker.services.resume_generator import render_resume_pdf
from resume_maker.services.validation import (
    PhotoTooLargeError,
    ResumeValidationError,
    prepare_document,
)
from resume_maker.utils.export import build_resume_filename

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.post(
    "/generate-pdf",
    dependencies=[Depends(require_json_content_type)],
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def generate_pdf_endpoint(request: GeneratePDFRequest) -> Response:
    """Validate the resume and return it as a PDF download."""
    try:
        document = prepare_document(request.to_document(), request.photo)
    except PhotoTooLargeError:
        raise APIError(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            "PAYLOAD_TOO_LARGE",
            "Photo exceeds 5MB limit",
        ) from None
    except ResumeValidationError as exc:
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            "VALIDATION_ERROR",
            "Request validation failed",
            exc.details,
        ) from None

    try:
        pdf_bytes = render_resume_pdf(document)
    except BackendError:
        logger.exception("Failed to generate resume PDF")
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_ERROR",
            "Unexpected server error",
        ) from None

    info = document.personal_info
    filename = build_resume_filename(info.first_name, info.last_name)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
