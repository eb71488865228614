"""Tests for the HTTP API."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from resume_maker.api.main import app
from resume_maker.pdf.backend import BackendError
from resume_maker.services import validation

GENERATE_URL = "/api/v1/resumes/generate-pdf"


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def payload() -> dict:
    return {
        "data": {
            "personalInfo": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "linkedin": "linkedin.com/in/ada",
                "otherLinks": [{"id": "1", "label": "Blog", "url": "ada.dev/blog"}],
            },
            "experience": [
                {
                    "id": "exp-1",
                    "company": "Analytical Engine Project",
                    "role": "Analyst",
                    "startDate": "1842",
                    "endDate": "1843",
                    "bullets": ["Published the first algorithm"],
                }
            ],
            "technicalSkills": {"languages": "Mathematics", "developerTools": "Punched cards"},
        },
        "settings": {"showPhoto": False, "fontSize": "medium", "fontFamily": "times"},
    }


class TestHealth:
    def test_health(self, client, monkeypatch) -> None:
        monkeypatch.setenv("RESUME_MAKER_API_VERSION", "2.3.4")
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "2.3.4"}


class TestTemplates:
    def test_list_templates(self, client) -> None:
        response = client.get("/api/v1/templates")

        assert response.status_code == 200
        templates = response.json()["templates"]
        assert [t["id"] for t in templates] == ["classic"]
        assert templates[0]["isDefault"] is True
        assert templates[0]["name"] == "Classic"


class TestGeneratePdf:
    def test_returns_pdf_attachment(self, client, payload) -> None:
        response = client.post(GENERATE_URL, json=payload)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="Ada_Lovelace_Resume.pdf"'
        )
        assert response.content.startswith(b"%PDF")
        assert b"mailto:ada@example.com" in response.content
        assert b"https://ada.dev/blog" in response.content

    def test_settings_default_when_omitted(self, client, payload) -> None:
        del payload["settings"]
        response = client.post(GENERATE_URL, json=payload)
        assert response.status_code == 200

    def test_photo_is_embedded(self, client, payload, png_data_url) -> None:
        payload["settings"]["showPhoto"] = True
        payload["photo"] = png_data_url

        response = client.post(GENERATE_URL, json=payload)

        assert response.status_code == 200
        assert b"/Subtype /Image" in response.content

    def test_validation_error(self, client, payload) -> None:
        payload["data"]["personalInfo"]["firstName"] = ""
        payload["settings"]["fontFamily"] = "comic"

        response = client.post(GENERATE_URL, json=payload)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Request validation failed"
        assert {d["field"] for d in error["details"]} == {
            "data.personalInfo.firstName",
            "settings.fontFamily",
        }

    def test_missing_photo_when_requested(self, client, payload) -> None:
        payload["settings"]["showPhoto"] = True

        response = client.post(GENERATE_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["details"][0]["field"] == "photo"

    def test_bad_photo_format(self, client, payload) -> None:
        payload["settings"]["showPhoto"] = True
        payload["photo"] = "data:image/gif;base64,R0lGODlh"

        response = client.post(GENERATE_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_photo_too_large(self, client, payload, png_data_url, monkeypatch) -> None:
        monkeypatch.setattr(validation, "MAX_PHOTO_SIZE_BYTES", 10)
        payload["settings"]["showPhoto"] = True
        payload["photo"] = png_data_url

        response = client.post(GENERATE_URL, json=payload)

        assert response.status_code == 413
        assert response.json()["error"]["code"] == "PAYLOAD_TOO_LARGE"

    def test_backend_failure(self, client, payload) -> None:
        with patch(
            "resume_maker.api.routes.resumes.render_resume_pdf",
            side_effect=BackendError("boom"),
        ):
            response = client.post(GENERATE_URL, json=payload)

        assert response.status_code == 500
        assert response.json() == {
            "error": {"code": "INTERNAL_ERROR", "message": "Unexpected server error"}
        }

    def test_malformed_body(self, client) -> None:
        response = client.post(
            GENERATE_URL,
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": {"code": "BAD_REQUEST", "message": "Malformed JSON body"}
        }

    def test_body_with_wrong_shape(self, client) -> None:
        response = client.post(GENERATE_URL, json={"data": "not an object"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert error["message"] == "Malformed JSON body"
        assert error["details"][0]["field"] == "data"

    @pytest.mark.parametrize("content_type", ["text/plain", None])
    def test_non_json_content_type(self, client, payload, content_type) -> None:
        headers = {"content-type": content_type} if content_type else {}
        response = client.post(
            GENERATE_URL,
            content=json.dumps(payload).encode(),
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "code": "BAD_REQUEST",
                "message": "Content-Type must be application/json",
            }
        }
