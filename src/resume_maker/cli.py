"""Command-line entry point: render a JSON resume request to a PDF file."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from resume_maker.api.schemas.resumes import GeneratePDFRequest
from resume_maker.config import get_log_level
from resume_maker.pdf.backend import BackendError
from resume_maker.services.resume_generator import generate_resume_pdf
from resume_maker.services.validation import ResumeValidationError, prepare_document
from resume_maker.templates import DEFAULT_TEMPLATE, list_templates
from resume_maker.utils.export import build_resume_filename


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-maker",
        description="Render a resume JSON request (same shape as the API body) to PDF.",
    )
    parser.add_argument("input", type=Path, help="Path to the request JSON file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output PDF path (default: <First>_<Last>_Resume.pdf next to the input)",
    )
    parser.add_argument(
        "--template",
        default=DEFAULT_TEMPLATE,
        choices=list_templates(),
        help="Template to render with",
    )
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse, validate and render one request file.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)

    try:
        raw = args.input.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"❌ Cannot read {args.input}: {exc}")
        return 1

    try:
        request = GeneratePDFRequest.model_validate_json(raw)
    except ValidationError as exc:
        print(f"❌ Malformed request: {exc}")
        return 1

    try:
        document = prepare_document(request.to_document(), request.photo)
    except ResumeValidationError as exc:
        print("❌ Request validation failed:")
        for detail in exc.details:
            print(f"   - {detail.field}: {detail.message}")
        return 1

    output = args.output
    if output is None:
        info = document.personal_info
        output = args.input.parent / build_resume_filename(info.first_name, info.last_name)

    try:
        path = generate_resume_pdf(document, output, template_name=args.template)
    except BackendError as exc:
        print(f"❌ Rendering failed: {exc}")
        return 1

    print(f"✅ Wrote {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
