"""Pydantic schemas for template listing."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TemplateResponse(BaseModel):
    """A selectable resume template."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    is_default: bool = Field(False, description="Whether the template is preselected")


class TemplateListResponse(BaseModel):
    templates: list[TemplateResponse]
