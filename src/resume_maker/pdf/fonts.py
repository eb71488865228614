"""Font registration for the supported font families.

A family resolves, in order, to:

1. a complete ``<stem>-{Regular,Bold,Italic,BoldItalic}.ttf`` set in the
   configured font directory (EB Garamond, Carlito);
2. the TTF set shipped by its font package dependency (Source Serif Pro,
   Lato);
3. a built-in core font.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import font_lato
import font_source_serif_pro
from fpdf import FPDF

from resume_maker.config import get_font_dir
from resume_maker.constants.fonts import (
    CORE_FONT_FALLBACKS,
    FONT_FILE_SETS,
    FONT_VARIANTS,
    PACKAGED_FONTS,
    FontFamily,
)
from resume_maker.pdf.backend import BackendError

logger = logging.getLogger(__name__)

__all__ = ["PACKAGED_FONT_DIRS", "FontRegistry", "ResolvedFont"]

PACKAGED_FONT_DIRS: dict[FontFamily, Path] = {
    FontFamily.GARAMOND: Path(font_source_serif_pro.font_directory),
    FontFamily.CALIBRI: Path(font_lato.font_directory),
}


@dataclass(frozen=True, slots=True)
class ResolvedFont:
    """The backend font chosen for a family.

    Attributes:
        family: Requested family.
        name: Family name to pass to ``FPDF.set_font``.
        embedded: True when TTF files were registered (Unicode capable);
            False for a built-in core font (Latin-1 only).
    """

    family: FontFamily
    name: str
    embedded: bool


def _complete(files: dict[str, Path]) -> dict[str, Path] | None:
    return files if all(path.is_file() for path in files.values()) else None


class FontRegistry:
    """Resolves a :class:`FontFamily` to a font registered on a backend.

    Args:
        font_dir: Directory searched first; defaults to ``RESUME_MAKER_FONT_DIR``.
        packaged_dirs: Font directories of the font packages, per family.
    """

    def __init__(
        self,
        font_dir: Path | None = None,
        packaged_dirs: Mapping[FontFamily, Path] | None = None,
    ) -> None:
        self.font_dir = font_dir if font_dir is not None else get_font_dir()
        self.packaged_dirs = dict(PACKAGED_FONT_DIRS if packaged_dirs is None else packaged_dirs)

    def font_files(self, family: FontFamily) -> dict[str, Path] | None:
        """Return ``{style: path}`` from the font directory, or None if incomplete."""
        stem = FONT_FILE_SETS.get(family)
        if stem is None:
            return None
        return _complete(
            {
                style: self.font_dir / f"{stem}-{variant}.ttf"
                for style, variant in FONT_VARIANTS.items()
            }
        )

    def packaged_font_files(self, family: FontFamily) -> dict[str, Path] | None:
        """Return ``{style: path}`` from the family's font package, or None."""
        directory = self.packaged_dirs.get(family)
        if family not in PACKAGED_FONTS or directory is None:
            return None
        _, names = PACKAGED_FONTS[family]
        return _complete({style: directory / name for style, name in names.items()})

    def register(self, pdf: FPDF, family: FontFamily) -> ResolvedFont:
        """Register *family* on *pdf* and return the font to select.

        Raises:
            BackendError: If a TTF file exists but cannot be loaded.
        """
        name: str | None = None
        files = self.font_files(family)
        if files is not None:
            name = FONT_FILE_SETS[family]
        else:
            files = self.packaged_font_files(family)
            if files is not None:
                name = PACKAGED_FONTS[family][0]

        if name is None or files is None:
            core_name = CORE_FONT_FALLBACKS[family]
            logger.debug("Using core font %s for %s", core_name, family.value)
            return ResolvedFont(family=family, name=core_name, embedded=False)

        for style, path in files.items():
            try:
                pdf.add_font(name, style, str(path))
            except Exception as exc:
                raise BackendError(f"Failed to register font {path.name}: {exc}") from exc
        logger.debug("Registered TTF family %s from %s", name, files[""].parent)
        return ResolvedFont(family=family, name=name, embedded=True)
