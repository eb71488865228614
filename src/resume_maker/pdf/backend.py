"""Creation and serialization of the fpdf2 document backend.

One backend instance is created per render call and never shared, since
``FPDF`` objects are not thread-safe.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fpdf import FPDF
from fpdf.errors import FPDFException

from resume_maker.pdf.layout_config import LayoutConfig

logger = logging.getLogger(__name__)

__all__ = ["BackendError", "create_backend", "serialize"]

# Fixed so identical input yields identical bytes.
_CREATION_DATE = datetime(1970, 1, 1, tzinfo=UTC)
DOCUMENT_TITLE = "Resume"


class BackendError(RuntimeError):
    """Raised when the PDF backend fails to register a font, embed an image,
    or serialize the document."""


def create_backend(config: LayoutConfig, *, compress: bool = False) -> FPDF:
    """Return a blank document configured with the geometry in *config*.

    Automatic page breaking is left to :class:`~resume_maker.pdf.context.LayoutContext`;
    the backend only records the bottom margin as its threshold.
    """
    pdf = FPDF(orientation="P", unit="mm", format=(config.page_width, config.page_height))
    pdf.set_margins(left=config.left_margin, top=config.top_margin, right=config.right_margin)
    pdf.set_auto_page_break(auto=False, margin=config.bottom_margin)
    # Zero cell padding: a line wrapped to width w is drawn in a cell of width w.
    pdf.c_margin = 0
    pdf.set_creation_date(_CREATION_DATE)
    pdf.set_title(DOCUMENT_TITLE)
    pdf.set_compression(compress)
    return pdf


def serialize(pdf: FPDF) -> bytes:
    """Return the finished document as bytes.

    Raises:
        BackendError: If fpdf2 cannot produce the output.
    """
    try:
        return bytes(pdf.output())
    except FPDFException as exc:
        logger.error("PDF serialization failed: %s", exc)
        raise BackendError(f"Failed to serialize PDF: {exc}") from exc
