"""Export utilities for naming and writing rendered resumes."""

from __future__ import annotations

import re
from pathlib import Path

DEFAULT_FILENAME = "Resume.pdf"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def sanitize_filename(name: str) -> str:
    """Keep only ASCII letters and digits from *name*."""
    return _NON_ALNUM.sub("", name)


def build_resume_filename(first_name: str, last_name: str) -> str:
    """Return a download name like ``Ada_Lovelace_Resume.pdf``.

    Falls back to ``Resume.pdf`` if either name is empty after sanitizing.
    """
    first = sanitize_filename(first_name)
    last = sanitize_filename(last_name)
    if not first or not last:
        return DEFAULT_FILENAME
    return f"{first}_{last}_Resume.pdf"


def write_pdf(content: bytes, output_path: Path) -> Path:
    """Write PDF *content* to *output_path*, adding ``.pdf`` if missing.

    Args:
        content: Serialized PDF bytes
        output_path: Destination file path

    Returns:
        Path to the created file
    """
    if output_path.suffix.lower() != ".pdf":
        output_path = output_path.with_suffix(".pdf")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(content)
    return output_path
