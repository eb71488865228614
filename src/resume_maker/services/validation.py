"""Request validation performed before a resume is rendered.

The renderer trusts its input; this module rejects requests that are
missing required fields, use unknown font settings, or carry a photo that
is not a small JPEG/PNG data URL.
"""

from __future__ import annotations

import base64
import binascii
import dataclasses
import logging
from dataclasses import dataclass

from resume_maker.constants.fonts import FontFamily, FontSize
from resume_maker.models.resume import Photo, ResumeDocument

logger = logging.getLogger(__name__)

__all__ = [
    "MAX_PHOTO_SIZE_BYTES",
    "PhotoTooLargeError",
    "ResumeValidationError",
    "ValidationErrorDetail",
    "decode_photo",
    "prepare_document",
    "validate_request",
]

MAX_PHOTO_SIZE_BYTES = 5 * 1024 * 1024

_PHOTO_PREFIXES = {
    "data:image/jpeg;base64,": "jpeg",
    "data:image/png;base64,": "png",
}


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """A validation failure tied to a request field path."""

    field: str
    message: str


class ResumeValidationError(ValueError):
    """Raised when a render request fails validation."""

    def __init__(self, details: list[ValidationErrorDetail]) -> None:
        super().__init__("validation failed")
        self.details = details


class PhotoTooLargeError(ResumeValidationError):
    """Raised when the decoded photo exceeds :data:`MAX_PHOTO_SIZE_BYTES`."""

    def __init__(self, size: int) -> None:
        super().__init__([ValidationErrorDetail("photo", "must not exceed 5MB")])
        self.size = size


def _blank(value: str | None) -> bool:
    return not (value and value.strip())


def validate_request(
    document: ResumeDocument,
    photo: str | None = None,
) -> list[ValidationErrorDetail]:
    """Return every field-level problem with a render request.

    Args:
        document: Resume content with raw font settings.
        photo: The photo data URL as received, if any.

    Returns:
        A list of details; empty when the request is valid.
    """
    details: list[ValidationErrorDetail] = []
    info = document.personal_info

    if _blank(info.first_name):
        details.append(ValidationErrorDetail("data.personalInfo.firstName", "must not be empty"))
    if _blank(info.last_name):
        details.append(ValidationErrorDetail("data.personalInfo.lastName", "must not be empty"))

    if document.settings.show_photo and _blank(photo):
        details.append(
            ValidationErrorDetail("photo", "must be provided when settings.showPhoto is true")
        )

    has_sections = (
        document.experience
        or document.education
        or document.projects
        or document.technical_skills.has_content()
    )
    if not has_sections:
        details.append(
            ValidationErrorDetail(
                "data",
                "at least one content section must be filled "
                "(experience, education, projects, or technicalSkills)",
            )
        )

    for index, experience in enumerate(document.experience):
        if _blank(experience.role) and _blank(experience.company):
            details.append(
                ValidationErrorDetail(f"data.experience[{index}]", "must include role or company")
            )

    for index, education in enumerate(document.education):
        if _blank(education.institution):
            details.append(
                ValidationErrorDetail(f"data.education[{index}].institution", "must not be empty")
            )

    for index, project in enumerate(document.projects):
        if _blank(project.name):
            details.append(
                ValidationErrorDetail(f"data.projects[{index}].name", "must not be empty")
            )

    family = str(getattr(document.settings.font_family, "value", document.settings.font_family))
    if family.strip().lower() not in {f.value for f in FontFamily}:
        details.append(
            ValidationErrorDetail(
                "settings.fontFamily", "must be one of: times, garamond, calibri, arial"
            )
        )

    size = str(getattr(document.settings.font_size, "value", document.settings.font_size))
    if size.strip().lower() not in {s.value for s in FontSize}:
        details.append(
            ValidationErrorDetail("settings.fontSize", "must be one of: small, medium, large")
        )

    return details


def decode_photo(data_url: str) -> Photo:
    """Decode a ``data:image/(jpeg|png);base64,`` URL.

    The format prefix is checked before the size limit, so a payload that
    is both malformed and oversized reports the format problem.

    Raises:
        ResumeValidationError: Wrong prefix or invalid base64.
        PhotoTooLargeError: Decoded payload is larger than 5MB.
    """
    value = data_url.strip()
    for prefix, image_format in _PHOTO_PREFIXES.items():
        if value.startswith(prefix):
            break
    else:
        raise ResumeValidationError(
            [ValidationErrorDetail("photo", "must be a base64 encoded JPEG or PNG data URL")]
        )

    try:
        decoded = base64.b64decode(value[len(prefix) :], validate=True)
    except (binascii.Error, ValueError):
        raise ResumeValidationError(
            [ValidationErrorDetail("photo", "invalid base64 photo encoding")]
        ) from None

    if len(decoded) > MAX_PHOTO_SIZE_BYTES:
        raise PhotoTooLargeError(len(decoded))

    return Photo(data=decoded, format=image_format)


def prepare_document(document: ResumeDocument, photo: str | None = None) -> ResumeDocument:
    """Validate a request and attach its decoded photo.

    Returns:
        *document* with ``photo`` set when a photo was supplied.

    Raises:
        ResumeValidationError: If any field is invalid.
        PhotoTooLargeError: If the photo exceeds the size limit.
    """
    details = validate_request(document, photo)
    if details:
        logger.warning("Validation failed for resume request: %s", details)
        raise ResumeValidationError(details)

    if _blank(photo):
        return document
    return dataclasses.replace(document, photo=decode_photo(photo))
