"""Layout and pagination engine built on fpdf2."""

from resume_maker.pdf.backend import BackendError, create_backend, serialize
from resume_maker.pdf.context import Cursor, LayoutContext
from resume_maker.pdf.fonts import FontRegistry, ResolvedFont
from resume_maker.pdf.layout_config import DEFAULT_LAYOUT, LayoutConfig

__all__ = [
    "DEFAULT_LAYOUT",
    "BackendError",
    "Cursor",
    "FontRegistry",
    "LayoutConfig",
    "LayoutContext",
    "ResolvedFont",
    "create_backend",
    "serialize",
]
