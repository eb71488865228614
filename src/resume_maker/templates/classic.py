"""Classic resume template.

Header, then Education, Experience, Projects and Technical Skills in that
order. Each list section is skipped when it has no entries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_maker.pdf.contact import build_contact_tokens, render_contact_line
from resume_maker.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from resume_maker.models.resume import (
        EducationEntry,
        ExperienceEntry,
        ProjectEntry,
        ResumeDocument,
        TechnicalSkills,
    )
    from resume_maker.pdf.context import LayoutContext

__all__ = ["ClassicResumeTemplate"]

SKILL_LABELS = (
    ("Languages", "languages"),
    ("Frameworks", "frameworks"),
    ("Developer Tools", "developer_tools"),
    ("Libraries", "libraries"),
)


class ClassicResumeTemplate(ResumeTemplate):
    """Clean single-column layout with two-column entry headings."""

    @property
    def name(self) -> str:
        return "Classic"

    @property
    def description(self) -> str:
        return "Clean single-column layout with serif typography. ATS-friendly."

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, ctx: LayoutContext, document: ResumeDocument) -> None:
        self._add_heading(ctx, document)

        if document.education:
            self._add_education(ctx, document.education)

        if document.experience:
            self._add_experience(ctx, document.experience)

        if document.projects:
            self._add_projects(ctx, document.projects)

        if document.technical_skills.has_content():
            self._add_skills(ctx, document.technical_skills)

    # -- heading -----------------------------------------------------------

    def _add_heading(self, ctx: LayoutContext, document: ResumeDocument) -> None:
        config = ctx.config
        x = config.left_margin
        width = config.content_width
        photo_bottom: float | None = None

        if document.settings.show_photo and document.photo is not None:
            ctx.place_image(
                document.photo.data,
                config.right_edge - config.photo_width,
                config.top_margin,
                config.photo_width,
                config.photo_height,
            )
            width -= config.photo_width + config.photo_gap
            photo_bottom = config.top_margin + config.photo_height

        ctx.write_wrapped_text(
            document.personal_info.full_name,
            style="B",
            size=ctx.name_size,
            align="C",
            x=x,
            width=width,
            line_height=config.name_line_height,
        )
        render_contact_line(ctx, build_contact_tokens(document.personal_info), x=x, width=width)
        ctx.advance(config.header_gap)

        # Keep the first section clear of the photo.
        if photo_bottom is not None and ctx.cursor.y < photo_bottom + config.header_gap:
            ctx.move_to_y(photo_bottom + config.header_gap)

    # -- education ---------------------------------------------------------

    def _add_education(self, ctx: LayoutContext, entries: Sequence[EducationEntry]) -> None:
        ctx.add_section_title("Education")
        for entry in entries:
            ctx.write_two_column_row(entry.institution, entry.location, bold_left=True)
            ctx.write_two_column_row(
                entry.degree,
                self.format_date_range(entry.start_date, entry.end_date),
            )
            self._add_bullets(ctx, entry.bullets)
            ctx.advance(ctx.config.entry_spacing)

    # -- experience --------------------------------------------------------

    def _add_experience(self, ctx: LayoutContext, entries: Sequence[ExperienceEntry]) -> None:
        ctx.add_section_title("Experience")
        for entry in entries:
            ctx.write_two_column_row(
                entry.role,
                self.format_date_range(entry.start_date, entry.end_date),
                bold_left=True,
            )
            ctx.write_two_column_row(entry.company, entry.location)
            self._add_bullets(ctx, entry.bullets)
            ctx.advance(ctx.config.entry_spacing)

    # -- projects ----------------------------------------------------------

    def _add_projects(self, ctx: LayoutContext, entries: Sequence[ProjectEntry]) -> None:
        ctx.add_section_title("Projects")
        for entry in entries:
            ctx.write_two_column_row(
                entry.name,
                self.format_date_range(entry.start_date, entry.end_date),
                bold_left=True,
            )
            if self.has_text(entry.tech_stack):
                ctx.write_wrapped_text(entry.tech_stack, style="I")
            self._add_bullets(ctx, entry.bullets)
            ctx.advance(ctx.config.entry_spacing)

    # -- skills ------------------------------------------------------------

    def _add_skills(self, ctx: LayoutContext, skills: TechnicalSkills) -> None:
        ctx.add_section_title("Technical Skills")
        for label, attribute in SKILL_LABELS:
            ctx.render_labeled_skill_line(label, getattr(skills, attribute))

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _add_bullets(ctx: LayoutContext, bullets: Sequence[str]) -> None:
        for bullet in bullets:
            ctx.write_bullet(bullet)
