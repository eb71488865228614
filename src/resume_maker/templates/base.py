"""Abstract base class for pluggable resume templates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resume_maker.models.resume import ResumeDocument
    from resume_maker.pdf.context import LayoutContext

__all__ = ["ResumeTemplate"]


class ResumeTemplate(ABC):
    """Interface that every resume template must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name shown in the UI."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line summary shown in the template picker."""

    @abstractmethod
    def build(self, ctx: LayoutContext, document: ResumeDocument) -> None:
        """Lay out *document* onto the page(s) owned by *ctx*."""

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def has_text(value: str | None) -> bool:
        return bool(value and value.strip())

    @staticmethod
    def format_date_range(start: str | None, end: str | None) -> str:
        """Return ``"<start> - <end>"``, whichever side is present, or ``""``.

        Dates are free text and are not reformatted.
        """
        start_str = (start or "").strip()
        end_str = (end or "").strip()

        if start_str and end_str:
            return f"{start_str} - {end_str}"
        return start_str or end_str
