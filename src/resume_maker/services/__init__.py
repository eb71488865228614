"""Business-logic services for resume rendering."""

from resume_maker.services.resume_generator import generate_resume_pdf, render_resume_pdf
from resume_maker.services.validation import (
    PhotoTooLargeError,
    ResumeValidationError,
    ValidationErrorDetail,
    decode_photo,
    prepare_document,
    validate_request,
)

__all__ = [
    "PhotoTooLargeError",
    "ResumeValidationError",
    "ValidationErrorDetail",
    "decode_photo",
    "generate_resume_pdf",
    "prepare_document",
    "render_resume_pdf",
    "validate_request",
]
