"""Pydantic schemas for resume API endpoints.

Wire fields are camelCase; Python attributes are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_maker.models.resume import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    PersonalLink,
    ProjectEntry,
    RenderSettings,
    ResumeDocument,
    TechnicalSkills,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalLinkSchema(_CamelModel):
    """A custom labeled link (portfolio, blog, ...)."""

    id: str | None = None
    label: str = ""
    url: str = ""


class PersonalInfoSchema(_CamelModel):
    """Header content for the resume."""

    first_name: str = ""
    last_name: str = ""
    location: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    other_links: list[PersonalLinkSchema] = Field(default_factory=list)


class ExperienceEntrySchema(_CamelModel):
    id: str | None = None
    company: str = ""
    location: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: list[str] = Field(default_factory=list)


class EducationEntrySchema(_CamelModel):
    id: str | None = None
    institution: str = ""
    location: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: list[str] = Field(default_factory=list)


class ProjectEntrySchema(_CamelModel):
    id: str | None = None
    name: str = ""
    tech_stack: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: list[str] = Field(default_factory=list)


class TechnicalSkillsSchema(_CamelModel):
    languages: str = ""
    frameworks: str = ""
    developer_tools: str = ""
    libraries: str = ""


class ResumeDataSchema(_CamelModel):
    """All resume sections."""

    personal_info: PersonalInfoSchema = Field(default_factory=PersonalInfoSchema)
    experience: list[ExperienceEntrySchema] = Field(default_factory=list)
    education: list[EducationEntrySchema] = Field(default_factory=list)
    projects: list[ProjectEntrySchema] = Field(default_factory=list)
    technical_skills: TechnicalSkillsSchema = Field(default_factory=TechnicalSkillsSchema)


class ResumeSettingsSchema(_CamelModel):
    """Rendering options. Font values are checked by request validation."""

    show_photo: bool = Field(False, description="Embed the photo in the header")
    font_size: str = Field("medium", description="small, medium or large")
    font_family: str = Field("times", description="times, garamond, calibri or arial")


class GeneratePDFRequest(_CamelModel):
    """Request schema for generating a PDF resume."""

    data: ResumeDataSchema = Field(default_factory=ResumeDataSchema)
    settings: ResumeSettingsSchema = Field(default_factory=ResumeSettingsSchema)
    photo: str | None = Field(None, description="data:image/(jpeg|png);base64,... URL")

    def to_document(self) -> ResumeDocument:
        """Convert to the renderer's immutable model (photo not decoded)."""
        info = self.data.personal_info
        return ResumeDocument(
            personal_info=PersonalInfo(
                first_name=info.first_name,
                last_name=info.last_name,
                location=info.location,
                phone=info.phone,
                email=info.email,
                linkedin=info.linkedin,
                github=info.github,
                website=info.website,
                other_links=tuple(
                    PersonalLink(label=link.label, url=link.url) for link in info.other_links
                ),
            ),
            experience=tuple(
                ExperienceEntry(
                    company=e.company,
                    role=e.role,
                    location=e.location,
                    start_date=e.start_date,
                    end_date=e.end_date,
                    bullets=tuple(e.bullets),
                )
                for e in self.data.experience
            ),
            education=tuple(
                EducationEntry(
                    institution=e.institution,
                    degree=e.degree,
                    location=e.location,
                    start_date=e.start_date,
                    end_date=e.end_date,
                    bullets=tuple(e.bullets),
                )
                for e in self.data.education
            ),
            projects=tuple(
                ProjectEntry(
                    name=p.name,
                    tech_stack=p.tech_stack,
                    start_date=p.start_date,
                    end_date=p.end_date,
                    bullets=tuple(p.bullets),
                )
                for p in self.data.projects
            ),
            technical_skills=TechnicalSkills(
                languages=self.data.technical_skills.languages,
                frameworks=self.data.technical_skills.frameworks,
                developer_tools=self.data.technical_skills.developer_tools,
                libraries=self.data.technical_skills.libraries,
            ),
            settings=RenderSettings(
                font_family=self.settings.font_family,
                font_size=self.settings.font_size,
                show_photo=self.settings.show_photo,
            ),
        )
