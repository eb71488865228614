"""Layout templates, keyed by the id used in API requests and on the CLI."""

from __future__ import annotations

from collections.abc import Iterator

from resume_maker.templates.base import ResumeTemplate
from resume_maker.templates.classic import ClassicResumeTemplate

__all__ = [
    "DEFAULT_TEMPLATE",
    "ResumeTemplate",
    "get_template",
    "iter_templates",
    "list_templates",
]

DEFAULT_TEMPLATE = "classic"

_TEMPLATES: dict[str, ResumeTemplate] = {
    DEFAULT_TEMPLATE: ClassicResumeTemplate(),
}


def get_template(template_id: str) -> ResumeTemplate:
    """Look up a template by id (case-insensitive).

    Raises:
        ValueError: For an unregistered id.
    """
    template = _TEMPLATES.get(template_id.strip().lower())
    if template is None:
        known = ", ".join(list_templates())
        raise ValueError(f"Unknown template {template_id!r}; expected one of: {known}")
    return template


def list_templates() -> list[str]:
    return sorted(_TEMPLATES)


def iter_templates() -> Iterator[tuple[str, ResumeTemplate]]:
    """Yield ``(id, template)`` pairs in id order."""
    for template_id in list_templates():
        yield template_id, _TEMPLATES[template_id]
