"""Page geometry shared by every writer (all values in millimetres)."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_LAYOUT",
    "MIN_LEFT_COLUMN_WIDTH",
    "NARROW_LEFT_COLUMN_RATIO",
    "LayoutConfig",
]

# A two-column row whose left column would be narrower than this uses
# NARROW_LEFT_COLUMN_RATIO of the content width instead.
MIN_LEFT_COLUMN_WIDTH = 60.0
NARROW_LEFT_COLUMN_RATIO = 0.7


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Fixed geometry for one document. Defaults describe portrait A4."""

    page_width: float = 210.0
    page_height: float = 297.0
    left_margin: float = 20.0
    right_margin: float = 20.0
    top_margin: float = 20.0
    bottom_margin: float = 20.0
    line_height: float = 5.5
    name_line_height: float = 8.0
    section_spacing: float = 1.2
    entry_spacing: float = 0.8
    header_gap: float = 2.0
    right_column_width: float = 52.0
    skill_label_width: float = 40.0
    photo_width: float = 25.0
    photo_height: float = 30.0
    photo_gap: float = 4.0

    @property
    def content_width(self) -> float:
        return self.page_width - self.left_margin - self.right_margin

    @property
    def right_edge(self) -> float:
        return self.page_width - self.right_margin

    @property
    def printable_bottom(self) -> float:
        """Vertical overflow threshold."""
        return self.page_height - self.bottom_margin

    def two_column_widths(self) -> tuple[float, float]:
        """Return ``(left, right)`` column widths for two-column rows."""
        left = self.content_width - self.right_column_width
        if left < MIN_LEFT_COLUMN_WIDTH:
            left = self.content_width * NARROW_LEFT_COLUMN_RATIO
        return left, self.right_column_width


DEFAULT_LAYOUT = LayoutConfig()
