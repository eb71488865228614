"""Template listing routes."""

from __future__ import annotations

from fastapi import APIRouter

from resume_maker.api.schemas.templates import TemplateListResponse, TemplateResponse
from resume_maker.templates import DEFAULT_TEMPLATE, iter_templates

router = APIRouter(tags=["templates"])


@router.get("/templates", response_model=TemplateListResponse)
def list_templates_endpoint() -> TemplateListResponse:
    """List the resume templates available for rendering."""
    return TemplateListResponse(
        templates=[
            TemplateResponse(
                id=template_id,
                name=template.name,
                description=template.description,
                is_default=template_id == DEFAULT_TEMPLATE,
            )
            for template_id, template in iter_templates()
        ]
    )
