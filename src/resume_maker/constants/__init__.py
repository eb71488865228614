from __future__ import annotations

from resume_maker.constants.fonts import (
    FONT_FILE_SETS,
    PACKAGED_FONTS,
    FontFamily,
    FontSize,
)

__all__ = [
    "FONT_FILE_SETS",
    "PACKAGED_FONTS",
    "FontFamily",
    "FontSize",
]
