"""Integration tests for the POST /api/analyze endpoint."""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
import sys
import os

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))


PDF_BYTES = b"%PDF-1.7\n%fake test document\n%%EOF"


@pytest.fixture
def client(monkeypatch):
    """Create a test client with a mocked document analyzer."""
    # Import after path is set
    import main

    # Startup is not triggered without the context manager, so no tesseract is needed
    monkeypatch.setattr(main, "document_analyzer", Mock())
    yield TestClient(app=main.app)


@pytest.fixture
def mock_analyzer(client):
    """Configure the mocked analyzer with a canned result."""
    import main
    from models.analysis import AnalysisResult, TextStats

    main.document_analyzer.analyze_document.return_value = AnalysisResult(
        stats=TextStats(
            word_count=6,
            char_count=29,
            char_count_without_spaces=24,
            sentence_count=2,
            avg_word_length=4.0
        ),
        word_frequency=[("fox", 2), ("quick", 1), ("jumps", 1)]
    )
    return main.document_analyzer


def test_analyze_pdf(client, mock_analyzer):
    """A valid PDF upload returns stats and word frequencies."""
    response = client.post(
        "/api/analyze",
        files={"file": ("report.pdf", PDF_BYTES, "application/pdf")}
    )

    assert response.status_code == 200
    assert response.json() == {
        "stats": {
            "wordCount": 6,
            "charCount": 29,
            "charCountWithoutSpaces": 24,
            "sentenceCount": 2,
            "avgWordLength": 4.0,
        },
        "wordFrequency": [["fox", 2], ["quick", 1], ["jumps", 1]],
    }
    mock_analyzer.analyze_document.assert_called_once_with(PDF_BYTES)


def test_no_file(client, mock_analyzer):
    """A request without a file is rejected with 400."""
    response = client.post("/api/analyze")

    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}
    mock_analyzer.analyze_document.assert_not_called()


def test_non_pdf_rejected(client, mock_analyzer):
    """Uploads with another content type are rejected with 400."""
    response = client.post(
        "/api/analyze",
        files={"file": ("notes.txt", b"plain text", "text/plain")}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Only PDF files allowed"}
    mock_analyzer.analyze_document.assert_not_called()


def test_empty_file_rejected(client, mock_analyzer):
    """An empty PDF upload is rejected with 400."""
    response = client.post(
        "/api/analyze",
        files={"file": ("empty.pdf", b"", "application/pdf")}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Uploaded file is empty"}


def test_oversized_file_rejected(client, mock_analyzer, monkeypatch):
    """Uploads above the size limit are rejected with 400."""
    import main
    monkeypatch.setattr(main, "MAX_UPLOAD_SIZE_BYTES", 16)

    response = client.post(
        "/api/analyze",
        files={"file": ("big.pdf", b"%PDF" + b"0" * 32, "application/pdf")}
    )

    assert response.status_code == 400
    assert "limit" in response.json()["error"]
    mock_analyzer.analyze_document.assert_not_called()


def test_extraction_error_returns_500(client, mock_analyzer):
    """Extraction failures map to 500 with the failure message."""
    from services.pdf_extractor import ExtractionError
    mock_analyzer.analyze_document.side_effect = ExtractionError("Processing failed: broken xref")

    response = client.post(
        "/api/analyze",
        files={"file": ("scan.pdf", PDF_BYTES, "application/pdf")}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Processing failed: broken xref"}


def test_unexpected_error_returns_500(client, mock_analyzer):
    """Unexpected errors map to 500 with a generic message."""
    mock_analyzer.analyze_document.side_effect = RuntimeError("boom")

    response = client.post(
        "/api/analyze",
        files={"file": ("scan.pdf", PDF_BYTES, "application/pdf")}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error: boom"}


def test_health_endpoints(client):
    """Health endpoints respond without touching the analyzer."""
    assert client.get("/").json()["status"] == "ok"

    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert data["service"] == "pdf-text-analyzer"
