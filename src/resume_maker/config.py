"""Environment-driven configuration.

Values are read lazily so tests can override them with ``monkeypatch.setenv``.
A ``.env`` file in the working directory is honoured.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_VERSION = "1.0.0"
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


def get_font_dir() -> Path:
    """Return the directory searched for TTF font files."""
    env_dir = os.getenv("RESUME_MAKER_FONT_DIR")
    if env_dir:
        return Path(env_dir).expanduser().resolve()

    return Path(__file__).resolve().parent / "fonts"


def get_compress_output() -> bool:
    """Return whether page content streams should be compressed."""
    return os.getenv("RESUME_MAKER_COMPRESS_PDF", "").strip().lower() in _TRUTHY


def get_api_version() -> str:
    """Return the version string reported by the health endpoint."""
    return os.getenv("RESUME_MAKER_API_VERSION") or DEFAULT_API_VERSION


def get_log_level() -> str:
    """Return the logging level name used by the CLI."""
    return (os.getenv("RESUME_MAKER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def get_port() -> int:
    """Return the port the development server listens on."""
    return int(os.getenv("PORT") or 8080)
