"""Utility helpers."""

from resume_maker.utils.export import build_resume_filename, sanitize_filename, write_pdf

__all__ = [
    "build_resume_filename",
    "sanitize_filename",
    "write_pdf",
]
