from __future__ import annotations

import base64
from collections.abc import Callable
from pathlib import Path

import pytest

from resume_maker.constants.fonts import FontFamily
from resume_maker.models.resume import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    RenderSettings,
    ResumeDocument,
    TechnicalSkills,
)
from resume_maker.pdf.backend import create_backend
from resume_maker.pdf.context import LayoutContext
from resume_maker.pdf.fonts import FontRegistry
from resume_maker.pdf.layout_config import DEFAULT_LAYOUT, LayoutConfig

PNG_1X1_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4"
    "2mP8/x8AAwMCAO7YhJkAAAAASUVORK5CYII="
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Render with core fonts and uncompressed output regardless of the host."""
    monkeypatch.setenv("RESUME_MAKER_FONT_DIR", str(tmp_path / "no-fonts"))
    monkeypatch.delenv("RESUME_MAKER_COMPRESS_PDF", raising=False)


@pytest.fixture
def make_context(tmp_path: Path) -> Callable[..., LayoutContext]:
    """Factory for a LayoutContext on a fresh one-page backend."""

    def _make(
        config: LayoutConfig = DEFAULT_LAYOUT,
        family: FontFamily = FontFamily.TIMES,
        base_size: float = 11,
    ) -> LayoutContext:
        pdf = create_backend(config)
        font = FontRegistry(font_dir=tmp_path / "no-fonts").register(pdf, family)
        pdf.add_page()
        return LayoutContext(pdf, config, font, base_size)

    return _make


@pytest.fixture
def ctx(make_context: Callable[..., LayoutContext]) -> LayoutContext:
    return make_context()


@pytest.fixture
def sample_document() -> ResumeDocument:
    """A document touching every section."""
    return ResumeDocument(
        personal_info=PersonalInfo(
            first_name="Ada",
            last_name="Lovelace",
            location="London, UK",
            phone="+44 20 7946 0000",
            email="ada@example.com",
            linkedin="linkedin.com/in/ada",
            github="github.com/ada",
        ),
        education=(
            EducationEntry(
                institution="University of London",
                location="London, UK",
                degree="B.Sc. Mathematics",
                start_date="Sep 1832",
                end_date="Jun 1835",
                bullets=("Studied under Augustus De Morgan",),
            ),
        ),
        experience=(
            ExperienceEntry(
                company="Analytical Engine Project",
                role="Analyst",
                location="London, UK",
                start_date="Jan 1842",
                end_date="Dec 1843",
                bullets=("Wrote the first published algorithm for a computing machine",),
            ),
        ),
        projects=(
            ProjectEntry(
                name="Bernoulli Numbers",
                tech_stack="Punched cards, Difference tables",
                start_date="1843",
                bullets=("Computed Bernoulli numbers on the Analytical Engine",),
            ),
        ),
        technical_skills=TechnicalSkills(languages="Mathematics", frameworks="Analytical Engine"),
        settings=RenderSettings(),
    )


@pytest.fixture
def png_bytes() -> bytes:
    """Smallest valid PNG (1x1, grey + alpha)."""
    return base64.b64decode(PNG_1X1_BASE64)


@pytest.fixture
def png_data_url() -> str:
    return f"data:image/png;base64,{PNG_1X1_BASE64}"
