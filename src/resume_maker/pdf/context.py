"""Per-render layout state: cursor, pagination and primitive writers.

Every atomic write unit (a wrapped line, a section title, a two-column row,
a skill line) first calls :meth:`LayoutContext.ensure_space` with its full
height, so a unit is never split across pages.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from fpdf import FPDF

from resume_maker.constants.fonts import NAME_SIZE_OFFSET, SECTION_TITLE_SIZE_OFFSET
from resume_maker.pdf.backend import BackendError
from resume_maker.pdf.fonts import ResolvedFont
from resume_maker.pdf.layout_config import LayoutConfig
from resume_maker.pdf.measure import TextMeasurer

logger = logging.getLogger(__name__)

__all__ = ["Cursor", "LayoutContext", "fold_to_latin1"]

BULLET_PREFIX = "- "

# Typographic characters core fonts cannot encode.
_LATIN1_REPLACEMENTS = {
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    "\u2022": "-",  # bullet
    "\u2026": "...",  # ellipsis
}


def fold_to_latin1(text: str) -> str:
    """Return *text* restricted to Latin-1, as required by core fonts."""
    for char, replacement in _LATIN1_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Snapshot of the write position."""

    x: float
    y: float
    page: int


class LayoutContext:
    """Owns the cursor and draws primitives for a single render.

    Args:
        pdf: Backend with at least one page added.
        config: Document geometry.
        font: Font resolved for the document's family.
        base_size: Body text size in points.
    """

    def __init__(
        self,
        pdf: FPDF,
        config: LayoutConfig,
        font: ResolvedFont,
        base_size: float,
    ) -> None:
        self.pdf = pdf
        self.config = config
        self.font = font
        self.base_size = base_size
        self.measurer = TextMeasurer(pdf)
        self.set_font()

    # ------------------------------------------------------------------
    # cursor & pagination
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> Cursor:
        return Cursor(x=self.pdf.get_x(), y=self.pdf.get_y(), page=self.pdf.page_no())

    @property
    def page_count(self) -> int:
        return self.pdf.pages_count

    @property
    def title_size(self) -> float:
        return self.base_size + SECTION_TITLE_SIZE_OFFSET

    @property
    def name_size(self) -> float:
        return self.base_size + NAME_SIZE_OFFSET

    def ensure_space(self, needed: float) -> bool:
        """Start a new page if *needed* would cross the printable bottom.

        A block taller than a whole page does not trigger a break when the
        cursor is already at the top margin.

        Returns:
            True if a new page was started.
        """
        y = self.pdf.get_y()
        if y + needed <= self.config.printable_bottom or y <= self.config.top_margin:
            return False

        self.pdf.add_page()
        self.pdf.set_xy(self.config.left_margin, self.config.top_margin)
        logger.debug("Page break before %.1fmm block at y=%.1f", needed, y)
        return True

    def advance(self, height: float) -> None:
        """Move the cursor down by *height* and back to the left margin."""
        self.move_to_y(self.pdf.get_y() + height)

    def move_to_y(self, y: float) -> None:
        self.pdf.set_xy(self.config.left_margin, y)

    # ------------------------------------------------------------------
    # fonts & measurement
    # ------------------------------------------------------------------

    def set_font(self, style: str = "", size: float | None = None) -> None:
        self.pdf.set_font(self.font.name, style, size or self.base_size)

    def prepare_text(self, text: str) -> str:
        """Return *text* in a form the active font can encode."""
        return text if self.font.embedded else fold_to_latin1(text)

    def measure(self, text: str) -> float:
        return self.measurer.measure_width(text)

    def wrap(self, text: str, width: float) -> list[str]:
        return self.measurer.wrap_to_width(text, width)

    # ------------------------------------------------------------------
    # primitive writers
    # ------------------------------------------------------------------

    def write_wrapped_text(
        self,
        text: str,
        style: str = "",
        size: float | None = None,
        align: str = "L",
        *,
        x: float | None = None,
        width: float | None = None,
        line_height: float | None = None,
    ) -> None:
        """Wrap *text* and draw it line by line, breaking pages per line.

        Blank input draws nothing. *x* and *width* default to the full
        content area.
        """
        stripped = text.strip()
        if not stripped:
            return

        x = self.config.left_margin if x is None else x
        width = self.config.content_width if width is None else width
        line_height = line_height or self.config.line_height

        self.set_font(style, size)
        for line in self.wrap(self.prepare_text(stripped), width):
            self.ensure_space(line_height)
            y = self.pdf.get_y()
            self.pdf.set_xy(x, y)
            self.pdf.cell(width, line_height, line, align=align)
            self.move_to_y(y + line_height)

    def write_two_column_row(self, left: str, right: str, bold_left: bool = False) -> None:
        """Draw a left-aligned and a right-aligned column side by side.

        Both columns are wrapped first; the row height is the taller column
        and is requested from :meth:`ensure_space` as one unit before any
        line is drawn. The right column is always regular weight.
        """
        left = left.strip()
        right = right.strip()
        if not left and not right:
            return

        left_width, right_width = self.config.two_column_widths()
        left_style = "B" if bold_left else ""
        line_height = self.config.line_height

        # Phase 1: measure.
        self.set_font(left_style)
        left_lines = self.wrap(self.prepare_text(left), left_width) if left else []
        self.set_font()
        right_lines = self.wrap(self.prepare_text(right), right_width) if right else []

        row_height = max(len(left_lines), len(right_lines)) * line_height
        self.ensure_space(row_height)
        top = self.pdf.get_y()

        # Phase 2: draw.
        left_x = self.config.left_margin
        right_x = self.config.right_edge - right_width
        self.set_font(left_style)
        for index, line in enumerate(left_lines):
            self.pdf.set_xy(left_x, top + index * line_height)
            self.pdf.cell(left_width, line_height, line, align="L")
        self.set_font()
        for index, line in enumerate(right_lines):
            self.pdf.set_xy(right_x, top + index * line_height)
            self.pdf.cell(right_width, line_height, line, align="R")

        self.move_to_y(top + row_height)

    def write_bullet(self, text: str) -> None:
        stripped = text.strip()
        if not stripped:
            return
        self.write_wrapped_text(BULLET_PREFIX + stripped, align="L")

    def add_section_title(self, title: str) -> None:
        """Draw an uppercase bold title with a full-width rule under it.

        Two line heights are requested so a title is never the last line
        on a page.
        """
        line_height = self.config.line_height
        self.ensure_space(2 * line_height)
        top = self.pdf.get_y()

        self.set_font("B", self.title_size)
        self.pdf.set_xy(self.config.left_margin, top)
        self.pdf.cell(
            self.config.content_width,
            line_height,
            self.prepare_text(title.strip().upper()),
            align="L",
        )
        rule_y = top + line_height
        self.pdf.line(self.config.left_margin, rule_y, self.config.right_edge, rule_y)
        self.move_to_y(rule_y + self.config.section_spacing)
        self.set_font()

    def render_labeled_skill_line(self, label: str, value: str) -> None:
        """Draw ``label:`` in a fixed bold column followed by wrapped *value*."""
        value = value.strip()
        if not value:
            return

        label_width = self.config.skill_label_width
        value_width = self.config.content_width - label_width
        line_height = self.config.line_height

        self.set_font("B")
        label_lines = self.wrap(self.prepare_text(f"{label}:"), label_width)
        self.set_font()
        value_lines = self.wrap(self.prepare_text(value), value_width)

        row_height = max(len(label_lines), len(value_lines)) * line_height
        self.ensure_space(row_height)
        top = self.pdf.get_y()

        self.set_font("B")
        for index, line in enumerate(label_lines):
            self.pdf.set_xy(self.config.left_margin, top + index * line_height)
            self.pdf.cell(label_width, line_height, line, align="L")
        self.set_font()
        value_x = self.config.left_margin + label_width
        for index, line in enumerate(value_lines):
            self.pdf.set_xy(value_x, top + index * line_height)
            self.pdf.cell(value_width, line_height, line, align="L")

        self.move_to_y(top + row_height)

    def place_image(self, data: bytes, x: float, y: float, width: float, height: float) -> None:
        """Embed image *data* inside the box at ``(x, y)``, keeping its aspect ratio.

        The cursor is not moved.

        Raises:
            BackendError: If the image cannot be decoded or embedded.
        """
        cursor = self.cursor
        try:
            self.pdf.image(io.BytesIO(data), x=x, y=y, w=width, h=height, keep_aspect_ratio=True)
        except Exception as exc:
            raise BackendError(f"Failed to embed image: {exc}") from exc
        self.pdf.set_xy(cursor.x, cursor.y)
