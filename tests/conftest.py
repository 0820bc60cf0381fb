"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

import os
import tempfile

# Point the local blob store at a throwaway directory before the app (and
# its settings) are imported.
os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("BLOB_STORAGE_DIR", tempfile.mkdtemp(prefix="upload-blobs-"))

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.upload_models import BlobDescriptor
from app.services.auth_service import auth_service
from app.services.upload_service import get_upload_service

DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app.

    session-scoped so the app is instantiated once per test run.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Auth fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def token() -> str:
    """A valid session token for user 'user-1'."""
    return auth_service.issue_token("user-1", email="user-1@example.com")


@pytest.fixture
def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


# ── Service override ───────────────────────────────────────────────────────────

@pytest.fixture
def stored_descriptor() -> BlobDescriptor:
    return BlobDescriptor(
        url="http://localhost:8000/blobs/photo.png",
        download_url="http://localhost:8000/blobs/photo.png?download=1",
        pathname="photo.png",
        content_type="image/png",
        content_disposition='inline; filename="photo.png"',
    )


@pytest.fixture
def mock_upload_service(stored_descriptor: BlobDescriptor):
    """
    Replace the app's UploadService with a mock for the duration of a test.

    ``process`` is an AsyncMock returning ``stored_descriptor``.
    """
    service = MagicMock()
    service.process = AsyncMock(return_value=stored_descriptor)
    app.dependency_overrides[get_upload_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_upload_service, None)


# ── Sample file fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def sample_png_file() -> dict:
    """A ``files=`` mapping for TestClient carrying a small PNG."""
    return {"file": ("photo.png", PNG_BYTES, "image/png")}


@pytest.fixture
def sample_docx_file() -> dict:
    """A ``files=`` mapping carrying a (fake) Word document."""
    return {"file": ("report.v2.docx", b"PK\x03\x04fake-docx", DOCX_TYPE)}
