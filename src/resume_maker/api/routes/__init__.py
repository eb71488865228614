"""Route handlers for the API."""

from resume_maker.api.routes import health, resumes, templates

__all__ = [
    "health",
    "resumes",
    "templates",
]
