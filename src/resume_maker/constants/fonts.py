"""
Font families and sizes offered by the resume renderer.
"""

from __future__ import annotations

from enum import Enum


class FontFamily(str, Enum):
    """Font families a user can pick for the whole document."""

    TIMES = "times"
    GARAMOND = "garamond"
    CALIBRI = "calibri"
    ARIAL = "arial"

    @classmethod
    def from_string(cls, value: str | None) -> FontFamily:
        """Return the family named by *value*, or :attr:`TIMES` when unknown.

        Unknown values are not an error here; rejecting them is the job of
        request validation.
        """
        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls.TIMES


class FontSize(str, Enum):
    """Base font size presets."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def points(self) -> float:
        """Base size in points for body text."""
        return _SIZE_POINTS[self]

    @classmethod
    def from_string(cls, value: str | None) -> FontSize:
        """Return the size named by *value*, or :attr:`MEDIUM` when unknown."""
        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls.MEDIUM


_SIZE_POINTS: dict[FontSize, float] = {
    FontSize.SMALL: 10,
    FontSize.MEDIUM: 11,
    FontSize.LARGE: 12,
}

# Offsets applied to the base size.
SECTION_TITLE_SIZE_OFFSET = 1
NAME_SIZE_OFFSET = 5

# Built-in PDF fonts, used only when no TTF files are found for a family.
# Garamond and Times must never resolve to the same core font.
CORE_FONT_FALLBACKS: dict[FontFamily, str] = {
    FontFamily.TIMES: "Times",
    FontFamily.GARAMOND: "Courier",
    FontFamily.CALIBRI: "Helvetica",
    FontFamily.ARIAL: "Helvetica",
}

# Fonts shipped by the font-* dependencies:
# family -> (fpdf family name, {style: file name in the package font directory}).
PACKAGED_FONTS: dict[FontFamily, tuple[str, dict[str, str]]] = {
    FontFamily.GARAMOND: (
        "SourceSerifPro",
        {
            "": "SourceSerifPro-Regular.ttf",
            "B": "SourceSerifPro-Bold.ttf",
            "I": "SourceSerifPro-It.ttf",
            "BI": "SourceSerifPro-BoldIt.ttf",
        },
    ),
    FontFamily.CALIBRI: (
        "Lato",
        {
            "": "Lato-Regular.ttf",
            "B": "Lato-Bold.ttf",
            "I": "Lato-Italic.ttf",
            "BI": "Lato-BoldItalic.ttf",
        },
    ),
}

# TTF file stems looked up in the font directory, as ``<stem>-<Variant>.ttf``.
FONT_FILE_SETS: dict[FontFamily, str] = {
    FontFamily.GARAMOND: "EBGaramond",
    FontFamily.CALIBRI: "Carlito",
}

# fpdf style code -> file variant suffix
FONT_VARIANTS: dict[str, str] = {
    "": "Regular",
    "B": "Bold",
    "I": "Italic",
    "BI": "BoldItalic",
}
