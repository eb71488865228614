"""End-to-end tests for rendering a ResumeDocument to PDF bytes."""

from __future__ import annotations

import dataclasses
import io

import pytest
from pypdf import PdfReader

from resume_maker.models.resume import (
    ExperienceEntry,
    PersonalInfo,
    Photo,
    RenderSettings,
    ResumeDocument,
)
from resume_maker.pdf.backend import BackendError
from resume_maker.services.resume_generator import generate_resume_pdf, render_resume_pdf


def _reader(pdf_bytes: bytes) -> PdfReader:
    return PdfReader(io.BytesIO(pdf_bytes))


def _text(pdf_bytes: bytes) -> str:
    return "\n".join(page.extract_text() for page in _reader(pdf_bytes).pages)


def _minimal(**overrides) -> ResumeDocument:
    fields = {
        "personal_info": PersonalInfo(first_name="Ada", last_name="Lovelace"),
        "experience": (
            ExperienceEntry(
                company="Analytical Engine Project",
                role="Analyst",
                start_date="1842",
                end_date="1843",
                bullets=("Published the first algorithm",),
            ),
        ),
    }
    fields.update(overrides)
    return ResumeDocument(**fields)


class TestRenderResumePdf:
    def test_minimal_resume_is_single_page_pdf(self) -> None:
        pdf_bytes = render_resume_pdf(_minimal())

        assert pdf_bytes.startswith(b"%PDF")
        reader = _reader(pdf_bytes)
        assert len(reader.pages) == 1
        text = _text(pdf_bytes)
        assert "Ada Lovelace" in text
        assert "EXPERIENCE" in text
        assert "- Published the first algorithm" in text

    def test_long_experience_spans_pages(self) -> None:
        bullets = tuple(
            f"Bullet {i}: delivered a long-running initiative that required careful "
            "coordination across several teams and a lot of wrapped text"
            for i in range(60)
        )
        document = _minimal(
            experience=(ExperienceEntry(company="Acme", role="Engineer", bullets=bullets),)
        )

        pdf_bytes = render_resume_pdf(document)

        assert len(_reader(pdf_bytes).pages) >= 2
        assert "Bullet 59" in _text(pdf_bytes)

    def test_contact_links_are_clickable(self) -> None:
        document = _minimal(
            personal_info=PersonalInfo(
                first_name="Ada",
                last_name="Lovelace",
                email="ada@example.com",
                linkedin="linkedin.com/in/ada",
            )
        )

        pdf_bytes = render_resume_pdf(document)

        assert b"mailto:ada@example.com" in pdf_bytes
        assert b"https://linkedin.com/in/ada" in pdf_bytes

    def test_font_family_changes_output(self) -> None:
        times = render_resume_pdf(_minimal(settings=RenderSettings(font_family="times")))
        garamond = render_resume_pdf(_minimal(settings=RenderSettings(font_family="garamond")))

        assert times != garamond
        assert b"/BaseFont /Times-Roman" in times
        assert b"/BaseFont /Times-Roman" not in garamond
        assert b"+SourceSerifPro" in garamond

    def test_calibri_and_arial_differ(self) -> None:
        calibri = render_resume_pdf(_minimal(settings=RenderSettings(font_family="calibri")))
        arial = render_resume_pdf(_minimal(settings=RenderSettings(font_family="arial")))

        assert calibri != arial
        assert b"+Lato" in calibri
        assert b"/BaseFont /Helvetica" in arial

    def test_each_font_family_renders_differently(self, sample_document) -> None:
        outputs = {
            render_resume_pdf(sample_document, RenderSettings(font_family=family))
            for family in ("times", "garamond", "calibri", "arial")
        }
        assert len(outputs) == 4

    def test_unknown_font_settings_fall_back_to_defaults(self) -> None:
        default = render_resume_pdf(_minimal())
        unknown = render_resume_pdf(
            _minimal(settings=RenderSettings(font_family="comic", font_size="huge"))
        )
        assert unknown == default

    def test_font_size_changes_output(self) -> None:
        small = render_resume_pdf(_minimal(settings=RenderSettings(font_size="small")))
        large = render_resume_pdf(_minimal(settings=RenderSettings(font_size="large")))
        assert small != large

    def test_settings_argument_overrides_document(self) -> None:
        document = _minimal(settings=RenderSettings(font_family="garamond"))
        assert render_resume_pdf(document, RenderSettings()) == render_resume_pdf(_minimal())

    def test_photo_is_embedded(self, png_bytes) -> None:
        document = _minimal(
            settings=RenderSettings(show_photo=True),
            photo=Photo(data=png_bytes, format="png"),
        )

        pdf_bytes = render_resume_pdf(document)

        assert b"/Subtype /Image" in pdf_bytes

    def test_photo_not_embedded_when_disabled(self, png_bytes) -> None:
        document = _minimal(photo=Photo(data=png_bytes, format="png"))
        assert b"/Subtype /Image" not in render_resume_pdf(document)

    def test_corrupt_photo_raises_backend_error(self) -> None:
        document = _minimal(
            settings=RenderSettings(show_photo=True),
            photo=Photo(data=b"\x89PNG broken", format="png"),
        )
        with pytest.raises(BackendError):
            render_resume_pdf(document)

    def test_output_is_deterministic(self, sample_document) -> None:
        assert render_resume_pdf(sample_document) == render_resume_pdf(sample_document)

    def test_non_latin1_text_renders_with_core_font(self) -> None:
        document = _minimal(
            personal_info=PersonalInfo(first_name="Zoë", last_name="Łukasz"),
        )
        pdf_bytes = render_resume_pdf(document)
        assert "Zoë ?ukasz" in _text(pdf_bytes)

    def test_compression_setting(self, monkeypatch) -> None:
        monkeypatch.setenv("RESUME_MAKER_COMPRESS_PDF", "true")
        compressed = render_resume_pdf(_minimal())

        assert b"(Ada Lovelace)" not in compressed
        assert "Ada Lovelace" in _text(compressed)

    def test_unknown_template_raises(self) -> None:
        with pytest.raises(ValueError):
            render_resume_pdf(_minimal(), template_name="fancy")

    def test_full_document_text(self, sample_document) -> None:
        text = _text(render_resume_pdf(sample_document))

        for expected in (
            "EDUCATION",
            "University of London",
            "Sep 1832 - Jun 1835",
            "Analyst",
            "Jan 1842 - Dec 1843",
            "PROJECTS",
            "Punched cards, Difference tables",
            "TECHNICAL SKILLS",
            "Languages:",
            "Frameworks:",
        ):
            assert expected in text


class TestGenerateResumePdf:
    def test_writes_file(self, tmp_path, sample_document) -> None:
        path = generate_resume_pdf(sample_document, tmp_path / "out" / "resume.pdf")

        assert path == tmp_path / "out" / "resume.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_adds_pdf_suffix(self, tmp_path, sample_document) -> None:
        path = generate_resume_pdf(sample_document, tmp_path / "resume")
        assert path.suffix == ".pdf"
        assert path.exists()

    def test_settings_are_applied(self, tmp_path, sample_document) -> None:
        settings = dataclasses.replace(sample_document.settings, font_family="garamond")
        path = generate_resume_pdf(sample_document, tmp_path / "resume.pdf", settings)
        assert b"+SourceSerifPro" in path.read_bytes()
