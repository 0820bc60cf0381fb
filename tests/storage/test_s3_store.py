"""
tests/storage/test_s3_store.py

Unit tests for S3BlobStore.

The boto3 client is a MagicMock; the tests check what would be sent to
S3 and how failures are translated.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from app.core.exceptions import StorageError
from app.storage.s3_store import S3BlobStore

BASE = "https://cdn.example.com"


# ── Helpers ────────────────────────────────────────────────────────────────────

def _store(client: MagicMock | None = None) -> S3BlobStore:
    return S3BlobStore(bucket="uploads", client=client or MagicMock(), public_base_url=BASE)


# ── Tests ──────────────────────────────────────────────────────────────────────

class TestS3BlobStore:

    def test_put_object_receives_bytes_and_public_acl(self) -> None:
        client = MagicMock()

        _store(client).store("photo.png", b"\x89PNG\r\n\x1a\ndata")

        client.put_object.assert_called_once_with(
            Bucket="uploads",
            Key="photo.png",
            Body=b"\x89PNG\r\n\x1a\ndata",
            ContentType="image/png",
            ACL="public-read",
        )

    def test_text_is_encoded_and_explicit_type_kept(self) -> None:
        client = MagicMock()

        _store(client).store("report.md", "# Hi", content_type="text")

        kwargs = client.put_object.call_args.kwargs
        assert kwargs["Body"] == b"# Hi"
        assert kwargs["ContentType"] == "text"

    def test_descriptor_url(self) -> None:
        descriptor = _store().store("report.md", "# Hi", content_type="text")

        assert descriptor.url == f"{BASE}/uploads/report.md"
        assert descriptor.pathname == "report.md"

    def test_descriptor_url_quotes_key_but_object_key_is_verbatim(self) -> None:
        client = MagicMock()

        descriptor = _store(client).store("q3 results#final.png", b"data")

        assert client.put_object.call_args.kwargs["Key"] == "q3 results#final.png"
        assert descriptor.url == f"{BASE}/uploads/q3%20results%23final.png"
        assert descriptor.download_url == f"{BASE}/uploads/q3%20results%23final.png?download=1"

    def test_client_error_becomes_storage_error(self) -> None:
        client = MagicMock()
        client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )

        with pytest.raises(StorageError, match="put_object failed"):
            _store(client).store("a.png", b"data")

    def test_connection_error_becomes_storage_error(self) -> None:
        client = MagicMock()
        client.put_object.side_effect = EndpointConnectionError(endpoint_url="https://s3.test")

        with pytest.raises(StorageError):
            _store(client).store("a.png", b"data")

    def test_missing_bucket_is_rejected(self, monkeypatch) -> None:
        from app.core.config import settings

        monkeypatch.setattr(settings, "s3_bucket", "")

        with pytest.raises(StorageError, match="no bucket"):
            S3BlobStore(client=MagicMock())
