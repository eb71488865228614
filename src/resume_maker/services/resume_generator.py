"""Resume generation service.

Sets up the fpdf2 backend, resolves font settings and runs a registered
template over a :class:`ResumeDocument`.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from resume_maker.config import get_compress_output
from resume_maker.constants.fonts import FontFamily, FontSize
from resume_maker.pdf.backend import create_backend, serialize
from resume_maker.pdf.context import LayoutContext
from resume_maker.pdf.fonts import FontRegistry
from resume_maker.pdf.layout_config import DEFAULT_LAYOUT, LayoutConfig
from resume_maker.templates import DEFAULT_TEMPLATE, get_template
from resume_maker.utils.export import write_pdf

if TYPE_CHECKING:
    from resume_maker.models.resume import RenderSettings, ResumeDocument

logger = logging.getLogger(__name__)

__all__ = [
    "generate_resume_pdf",
    "render_resume_pdf",
]


def render_resume_pdf(
    document: ResumeDocument,
    settings: RenderSettings | None = None,
    *,
    template_name: str = DEFAULT_TEMPLATE,
    config: LayoutConfig = DEFAULT_LAYOUT,
    font_registry: FontRegistry | None = None,
) -> bytes:
    """Render *document* to PDF bytes.

    No input validation happens here; unknown font settings silently fall
    back to Times / medium.

    Args:
        document: Resume content.
        settings: Overrides ``document.settings`` when given.
        template_name: Registered template identifier.
        config: Page geometry.
        font_registry: Source of TTF fonts; defaults to the configured font dir.

    Returns:
        The serialized PDF.

    Raises:
        BackendError: If font registration, image embedding or serialization fails.
    """
    if settings is not None:
        document = dataclasses.replace(document, settings=settings)

    template = get_template(template_name)
    family = FontFamily.from_string(document.settings.font_family)
    size = FontSize.from_string(document.settings.font_size)

    pdf = create_backend(config, compress=get_compress_output())
    font = (font_registry or FontRegistry()).register(pdf, family)
    pdf.add_page()

    ctx = LayoutContext(pdf, config, font, size.points)
    template.build(ctx, document)

    output = serialize(pdf)
    logger.info(
        "Rendered resume with %s template: %d page(s), %d bytes, font %s %spt",
        template_name,
        ctx.page_count,
        len(output),
        font.name,
        size.points,
    )
    return output


def generate_resume_pdf(
    document: ResumeDocument,
    output_path: Path,
    settings: RenderSettings | None = None,
    *,
    template_name: str = DEFAULT_TEMPLATE,
) -> Path:
    """Render *document* and write it to *output_path*.

    Returns:
        The path of the written ``.pdf`` file.
    """
    output = render_resume_pdf(document, settings, template_name=template_name)
    return write_pdf(output, Path(output_path))
