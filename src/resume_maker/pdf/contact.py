"""Contact line: tokens built from personal info, wrapped and centered.

Tokens are joined with ``" | "`` on each visual line. Lines are filled
greedily left to right; a separator never starts a line.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from resume_maker.models.resume import PersonalInfo
from resume_maker.pdf.context import LayoutContext

__all__ = [
    "LINK_COLOR",
    "SEPARATOR",
    "ContactToken",
    "break_contact_lines",
    "build_contact_tokens",
    "line_width",
    "normalize_url",
    "render_contact_line",
]

SEPARATOR = " | "
LINK_COLOR = (0, 0, 238)
TEXT_COLOR = (0, 0, 0)

_PASSTHROUGH_PREFIXES = ("http://", "https://", "mailto:", "tel:")
_MAILTO = "mailto:"


@dataclass(frozen=True, slots=True)
class ContactToken:
    """One contact-line segment; *url* is empty for plain text."""

    text: str
    url: str = ""


def normalize_url(raw: str) -> str:
    """Turn a user-entered link into an absolute link target.

    >>> normalize_url("linkedin.com/in/ada")
    'https://linkedin.com/in/ada'
    >>> normalize_url("ada@example.com")
    'mailto:ada@example.com'
    """
    value = raw.strip()
    if not value:
        return ""
    if value.lower().startswith(_PASSTHROUGH_PREFIXES):
        return value
    if "@" in value and "/" not in value:
        return f"mailto:{value}"
    return f"https://{value}"


def build_contact_tokens(info: PersonalInfo) -> list[ContactToken]:
    """Return the ordered contact tokens for *info*, skipping blank fields.

    Order: location, phone, email, LinkedIn, GitHub, website, then custom
    links. Location and phone are plain text; email links to ``mailto:``
    and is displayed without the scheme.
    """
    tokens: list[ContactToken] = []

    def _add(text: str, url: str = "") -> None:
        display = text.strip()
        if display:
            tokens.append(ContactToken(text=display, url=url))

    _add(info.location)
    _add(info.phone)

    email = info.email.strip()
    if email.lower().startswith(_MAILTO):
        email = email[len(_MAILTO) :].strip()
    _add(email, f"{_MAILTO}{email}")

    for value in (info.linkedin, info.github, info.website):
        _add(value, normalize_url(value))

    for link in info.other_links:
        _add(link.label.strip() or link.url, normalize_url(link.url))

    return tokens


def line_width(
    line: Sequence[ContactToken],
    measure: Callable[[str], float],
    separator: str = SEPARATOR,
) -> float:
    """Rendered width of *line* including separators."""
    if not line:
        return 0.0
    return sum(measure(token.text) for token in line) + measure(separator) * (len(line) - 1)


def break_contact_lines(
    tokens: Sequence[ContactToken],
    measure: Callable[[str], float],
    max_width: float,
    separator: str = SEPARATOR,
) -> list[list[ContactToken]]:
    """Greedily group *tokens* into lines no wider than *max_width*.

    A token that alone exceeds *max_width* gets a line of its own and is
    not split.
    """
    separator_width = measure(separator)
    lines: list[list[ContactToken]] = []
    current: list[ContactToken] = []
    current_width = 0.0

    for token in tokens:
        token_width = measure(token.text)
        if current and current_width + separator_width + token_width > max_width:
            lines.append(current)
            current = []
            current_width = 0.0
        if current:
            current_width += separator_width
        current.append(token)
        current_width += token_width

    if current:
        lines.append(current)
    return lines


def render_contact_line(
    ctx: LayoutContext,
    tokens: Sequence[ContactToken],
    *,
    x: float | None = None,
    width: float | None = None,
) -> None:
    """Draw *tokens* as centered lines, with link tokens clickable.

    *x* and *width* default to the full content area.
    """
    if not tokens:
        return

    x = ctx.config.left_margin if x is None else x
    width = ctx.config.content_width if width is None else width
    line_height = ctx.config.line_height
    pdf = ctx.pdf

    ctx.set_font()
    prepared = [ContactToken(text=ctx.prepare_text(t.text), url=t.url) for t in tokens]
    separator_width = ctx.measure(SEPARATOR)

    for line in break_contact_lines(prepared, ctx.measure, width):
        start_x = max(x, x + (width - line_width(line, ctx.measure)) / 2)
        ctx.ensure_space(line_height)
        top = pdf.get_y()
        pdf.set_xy(start_x, top)

        for index, token in enumerate(line):
            if index:
                pdf.cell(separator_width, line_height, SEPARATOR)
            token_width = ctx.measure(token.text)
            if token.url:
                pdf.set_text_color(*LINK_COLOR)
                pdf.cell(token_width, line_height, token.text, link=token.url)
                pdf.set_text_color(*TEXT_COLOR)
            else:
                pdf.cell(token_width, line_height, token.text)

        ctx.move_to_y(top + line_height)
