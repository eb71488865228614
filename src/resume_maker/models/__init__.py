"""Data models and type definitions"""

from resume_maker.models.resume import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    PersonalLink,
    Photo,
    ProjectEntry,
    RenderSettings,
    ResumeDocument,
    TechnicalSkills,
)

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "PersonalInfo",
    "PersonalLink",
    "Photo",
    "ProjectEntry",
    "RenderSettings",
    "ResumeDocument",
    "TechnicalSkills",
]
