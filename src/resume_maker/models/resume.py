"""Immutable resume content consumed by the layout engine.

The engine only reads these objects. Dates are free text (``"Apr 2025"``)
and are rendered exactly as given.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from resume_maker.constants.fonts import FontFamily, FontSize

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


@dataclass(frozen=True, slots=True)
class PersonalLink:
    """A custom labeled link shown in the contact line."""

    label: str = ""
    url: str = ""


@dataclass(frozen=True, slots=True)
class PersonalInfo:
    """Name and contact details shown in the header."""

    first_name: str = ""
    last_name: str = ""
    location: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    other_links: tuple[PersonalLink, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.first_name.strip()} {self.last_name.strip()}".strip()


@dataclass(frozen=True, slots=True)
class ExperienceEntry:
    """A single role."""

    company: str = ""
    role: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class EducationEntry:
    """A single degree."""

    institution: str = ""
    degree: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ProjectEntry:
    """A single project."""

    name: str = ""
    tech_stack: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TechnicalSkills:
    """Skill categories, each a free-text list such as ``"Python, Go"``."""

    languages: str = ""
    frameworks: str = ""
    developer_tools: str = ""
    libraries: str = ""

    def has_content(self) -> bool:
        """Return True if at least one category is non-blank."""
        return any(
            value.strip()
            for value in (self.languages, self.frameworks, self.developer_tools, self.libraries)
        )


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """User-selected rendering options.

    Font values may be enum members or raw strings; unknown strings fall back
    to the defaults when the document is rendered.
    """

    font_family: FontFamily | str = FontFamily.TIMES
    font_size: FontSize | str = FontSize.MEDIUM
    show_photo: bool = False


@dataclass(frozen=True, slots=True)
class Photo:
    """Decoded profile photo."""

    data: bytes
    format: str  # "jpeg" or "png"


@dataclass(frozen=True, slots=True)
class ResumeDocument:
    """Top-level bundle handed to the renderer."""

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()
    technical_skills: TechnicalSkills = field(default_factory=TechnicalSkills)
    settings: RenderSettings = field(default_factory=RenderSettings)
    photo: Photo | None = None
