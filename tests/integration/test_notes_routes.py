"""Integration tests for the notes endpoints."""

import uuid
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import UploadFile as StarletteUploadFile

from backend.app.api.deps import get_generator, get_notes_repository
from backend.app.config import Settings
from backend.app.db.inmemory import InMemoryNotesRequestRepository
from backend.app.db.repositories import RequestLogError
from backend.app.main import app
from backend.app.notes.generator import DeterministicNotesGenerator

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"


@pytest.fixture
def repository() -> InMemoryNotesRequestRepository:
    """Fresh in-memory request log per test."""
    return InMemoryNotesRequestRepository()


@pytest.fixture
def client(repository: InMemoryNotesRequestRepository) -> Iterator[TestClient]:
    """Test client wired to template generation and a fresh request log."""
    generator = DeterministicNotesGenerator()
    app.dependency_overrides[get_notes_repository] = lambda: repository
    app.dependency_overrides[get_generator] = lambda: generator
    yield TestClient(app)
    app.dependency_overrides.clear()


def _generate(client: TestClient, **form: str) -> dict:  # type: ignore[type-arg]
    data = {"class_level": "10", "subject": "Mathematics", "chapter_name": "Linear Equations"}
    data.update(form)
    response = client.post("/api/generate-notes", data=data)
    assert response.status_code == 200, response.text
    return response.json()  # type: ignore[no-any-return]


class TestGenerateNotes:
    """Test POST /api/generate-notes."""

    def test_generate_with_chapter_name(
        self, client: TestClient, repository: InMemoryNotesRequestRepository
    ) -> None:
        """Test notes for a named chapter are returned and recorded."""
        body = _generate(client)

        notes = body["notes"]
        assert notes["chapter_title"] == "Linear Equations"
        assert [h["number"] for h in notes["headings"]] == [1, 2, 3, 4]
        assert notes["headings"][0]["title"] == "Introduction to Linear Equations"
        assert "Mathematics" in notes["keywords"]
        assert uuid.UUID(body["id"])
        assert len(repository) == 1

    def test_generate_in_hindi(self, client: TestClient) -> None:
        """Test Hindi output uses the Hindi title convention."""
        notes = _generate(client, language="hindi", chapter_name="प्रकाश")["notes"]

        assert notes["chapter_title"] == "अध्याय: प्रकाश"
        assert len(notes["headings"]) == 4

    def test_generate_from_pdf_only(self, client: TestClient) -> None:
        """Test a PDF upload without a chapter name uses the placeholder title."""
        response = client.post(
            "/api/generate-notes",
            data={"class_level": "8", "subject": "Science"},
            files={"pdf": ("chapter.pdf", PDF_BYTES, "application/pdf")},
        )

        assert response.status_code == 200
        assert response.json()["notes"]["chapter_title"] == "Chapter from PDF"

    def test_rejects_non_pdf_upload(self, client: TestClient) -> None:
        """Test that only PDF uploads are accepted."""
        response = client.post(
            "/api/generate-notes",
            data={"class_level": "8", "subject": "Science"},
            files={"pdf": ("notes.txt", b"plain text", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Only PDF files are allowed"

    def test_requires_chapter_or_pdf(
        self, client: TestClient, repository: InMemoryNotesRequestRepository
    ) -> None:
        """Test that a request with neither chapter nor PDF is rejected."""
        response = client.post(
            "/api/generate-notes",
            data={"class_level": "8", "subject": "Science", "chapter_name": "   "},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Either chapter name or PDF content is required"
        assert len(repository) == 0

    def test_rejects_unknown_language(self, client: TestClient) -> None:
        """Test that unsupported languages fail validation."""
        response = client.post(
            "/api/generate-notes",
            data={"class_level": "8", "subject": "Science", "chapter_name": "Light", "language": "french"},
        )

        assert response.status_code == 422

    @pytest.mark.parametrize("class_level", ["0", "13"])
    def test_rejects_out_of_range_class(self, client: TestClient, class_level: str) -> None:
        """Test class levels outside 1-12."""
        response = client.post(
            "/api/generate-notes",
            data={"class_level": class_level, "subject": "Science", "chapter_name": "Light"},
        )

        assert response.status_code == 422

    def test_rejects_oversized_pdf(self, client: TestClient) -> None:
        """Test the upload size limit."""
        small_limit = Settings(max_upload_bytes=10)
        with patch("backend.app.api.routes.notes.get_settings", return_value=small_limit):
            response = client.post(
                "/api/generate-notes",
                data={"class_level": "8", "subject": "Science"},
                files={"pdf": ("big.pdf", PDF_BYTES, "application/pdf")},
            )

        assert response.status_code == 413

    def test_oversized_pdf_is_rejected_before_reading(self, client: TestClient) -> None:
        """Test that a known upload size over the limit skips reading the body."""
        small_limit = Settings(max_upload_bytes=10)
        with (
            patch("backend.app.api.routes.notes.get_settings", return_value=small_limit),
            patch.object(StarletteUploadFile, "read", new_callable=AsyncMock) as mock_read,
        ):
            response = client.post(
                "/api/generate-notes",
                data={"class_level": "8", "subject": "Science"},
                files={"pdf": ("big.pdf", PDF_BYTES, "application/pdf")},
            )

        assert response.status_code == 413
        mock_read.assert_not_awaited()

    def test_accepts_pdf_at_the_size_limit(self, client: TestClient) -> None:
        """Test that an upload exactly at the limit is accepted."""
        exact_limit = Settings(max_upload_bytes=len(PDF_BYTES))
        with patch("backend.app.api.routes.notes.get_settings", return_value=exact_limit):
            response = client.post(
                "/api/generate-notes",
                data={"class_level": "8", "subject": "Science"},
                files={"pdf": ("chapter.pdf", PDF_BYTES, "application/pdf")},
            )

        assert response.status_code == 200

    def test_request_log_failure_is_reported_separately(self, client: TestClient) -> None:
        """Test that a failed write is distinguishable from failed generation."""
        failing = InMemoryNotesRequestRepository()
        failing.record = AsyncMock(side_effect=RequestLogError("log unavailable"))  # type: ignore[method-assign]
        app.dependency_overrides[get_notes_repository] = lambda: failing

        response = client.post(
            "/api/generate-notes",
            data={"class_level": "10", "subject": "Mathematics", "chapter_name": "Algebra"},
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Notes were generated but could not be saved"

    def test_generation_failure_returns_500(
        self, client: TestClient, repository: InMemoryNotesRequestRepository
    ) -> None:
        """Test that an unexpected generator error maps to a generic 500."""
        broken = DeterministicNotesGenerator()
        broken.generate = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        app.dependency_overrides[get_generator] = lambda: broken

        response = client.post(
            "/api/generate-notes",
            data={"class_level": "10", "subject": "Mathematics", "chapter_name": "Algebra"},
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to generate notes. Please try again."
        assert len(repository) == 0


class TestReadEndpoints:
    """Test the recent, lookup, and export endpoints."""

    def test_recent_notes_newest_first(self, client: TestClient) -> None:
        """Test recent notes are ordered newest first and limited."""
        ids = [_generate(client, chapter_name=f"Chapter {i}")["id"] for i in range(3)]

        response = client.get("/api/recent-notes", params={"limit": 2})

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [ids[2], ids[1]]

    def test_recent_notes_default_limit(self, client: TestClient) -> None:
        """Test the default page size of five."""
        for i in range(7):
            _generate(client, chapter_name=f"Chapter {i}")

        response = client.get("/api/recent-notes")

        assert len(response.json()) == 5

    def test_recent_notes_rejects_zero_limit(self, client: TestClient) -> None:
        """Test the limit lower bound."""
        assert client.get("/api/recent-notes", params={"limit": 0}).status_code == 422

    def test_get_notes_by_id(self, client: TestClient) -> None:
        """Test fetching a stored request."""
        body = _generate(client, language="hindi")

        response = client.get(f"/api/notes/{body['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["class_level"] == 10
        assert data["subject"] == "Mathematics"
        assert data["chapter_name"] == "Linear Equations"
        assert data["language"] == "hindi"
        assert data["generated_notes"] == body["notes"]

    def test_get_notes_unknown_id(self, client: TestClient) -> None:
        """Test 404 for an unknown id."""
        response = client.get(f"/api/notes/{uuid.uuid4()}")

        assert response.status_code == 404

    def test_get_notes_malformed_id(self, client: TestClient) -> None:
        """Test 400 for an id that is not a UUID."""
        response = client.get("/api/notes/not-a-uuid")

        assert response.status_code == 400

    def test_export_notes_as_text(self, client: TestClient) -> None:
        """Test plain-text download of stored notes."""
        body = _generate(client)

        response = client.get(f"/api/notes/{body['id']}/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'filename="linear_equations_notes.txt"' in response.headers["content-disposition"]
        assert response.text.startswith("📚 Linear Equations\n\n1. Introduction to Linear Equations")
        assert "🔑 Keywords to Remember" in response.text


class TestSubjects:
    """Test GET /api/subjects."""

    def test_subjects_for_class(self, client: TestClient) -> None:
        """Test subject listing for a class level."""
        response = client.get("/api/subjects", params={"class_level": 5})

        assert response.status_code == 200
        assert response.json() == {
            "class_level": 5,
            "subjects": ["Mathematics", "English", "Hindi", "Bengali", "Science", "Social Science"],
        }

    def test_subjects_rejects_out_of_range(self, client: TestClient) -> None:
        """Test class level validation."""
        assert client.get("/api/subjects", params={"class_level": 13}).status_code == 422
