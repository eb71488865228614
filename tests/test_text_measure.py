"""Tests for the backend text measurer."""

from __future__ import annotations

import pytest

LONG_TEXT = (
    "Designed and shipped a layout engine that measures every line before drawing it, "
    "so that rows never straddle a page boundary and the right column stays aligned."
)


class TestMeasureWidth:
    def test_empty_string_has_zero_width(self, ctx) -> None:
        assert ctx.measure("") == 0

    def test_width_grows_with_text(self, ctx) -> None:
        assert ctx.measure("Hello world") > ctx.measure("Hello")

    def test_bold_is_wider(self, ctx) -> None:
        ctx.set_font()
        regular = ctx.measure("Analytical Engine")
        ctx.set_font("B")
        bold = ctx.measure("Analytical Engine")
        assert bold > regular

    def test_larger_size_is_wider(self, ctx) -> None:
        ctx.set_font(size=10)
        small = ctx.measure("Lovelace")
        ctx.set_font(size=16)
        assert ctx.measure("Lovelace") > small


class TestWrapToWidth:
    def test_empty_text_is_one_empty_line(self, ctx) -> None:
        assert ctx.wrap("", 100) == [""]

    @pytest.mark.parametrize("width", [0, -5])
    def test_non_positive_width_returns_text_unchanged(self, ctx, width) -> None:
        assert ctx.wrap("some text", width) == ["some text"]

    def test_short_text_fits_on_one_line(self, ctx) -> None:
        assert ctx.wrap("Hello world", 170) == ["Hello world"]

    def test_long_text_wraps_within_width(self, ctx) -> None:
        width = 80
        lines = ctx.wrap(LONG_TEXT, width)

        assert len(lines) > 1
        for line in lines:
            assert ctx.measure(line) <= width + 1e-6

    def test_wrapping_preserves_words(self, ctx) -> None:
        lines = ctx.wrap(LONG_TEXT, 80)
        assert " ".join(lines).split() == LONG_TEXT.split()

    def test_wrapped_lines_do_not_rewrap(self, ctx) -> None:
        width = 60
        for line in ctx.wrap(LONG_TEXT, width):
            assert ctx.wrap(line, width) == [line]

    def test_narrower_width_gives_more_lines(self, ctx) -> None:
        assert len(ctx.wrap(LONG_TEXT, 50)) > len(ctx.wrap(LONG_TEXT, 120))
