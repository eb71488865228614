"""String measurement and line splitting on top of the fpdf2 backend."""

from __future__ import annotations

from fpdf import FPDF
from fpdf.enums import MethodReturnValue

__all__ = ["TextMeasurer"]


class TextMeasurer:
    """Measures and wraps text with the font currently set on *pdf*.

    Callers must select the font, style and size on the backend first.
    """

    def __init__(self, pdf: FPDF) -> None:
        self._pdf = pdf

    def measure_width(self, text: str) -> float:
        """Return the rendered width of *text* in user units."""
        return self._pdf.get_string_width(text)

    def wrap_to_width(self, text: str, max_width: float) -> list[str]:
        """Split *text* into lines no wider than *max_width*.

        Always returns at least one line; empty input yields ``[""]``.
        A non-positive *max_width* returns the text unwrapped as one line.
        """
        if max_width <= 0:
            return [text]
        if not text:
            return [""]
        if "\n" not in text and self.measure_width(text) <= max_width:
            return [text]

        lines = self._pdf.multi_cell(
            max_width,
            1,
            text,
            dry_run=True,
            output=MethodReturnValue.LINES,
        )
        return [line.rstrip() for line in lines] or [""]
