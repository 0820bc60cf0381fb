"""app/storage/__init__.py — public API of the storage package."""

from app.storage.base import BlobStore, guess_content_type
from app.storage.local_store import LocalBlobStore
from app.storage.s3_store import S3BlobStore

__all__ = [
    "BlobStore",
    "LocalBlobStore",
    "S3BlobStore",
    "guess_content_type",
]
