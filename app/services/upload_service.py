"""
app/services/upload_service.py

Orchestrates the upload pipeline for one validated request:

    UploadedFile
      └─ FileValidator.validate()            size + allow-list
           └─ AllowedTypeTable.classify()    image | document
                ├─ image    → BlobStore.store(original name, original bytes)
                └─ document → DocumentConverter.convert()
                                └─ BlobStore.store(<stem>.md, markdown, "text")

All dependencies are constructor-injected so tests can swap them out with
mocks; the module-level singleton wires in the production implementations.
"""

from __future__ import annotations

import asyncio

from app.converter.base import DocumentConverter
from app.converter.http_converter import HttpDocumentConverter
from app.core.config import settings
from app.core.constants import MARKDOWN_CONTENT_TYPE, PUBLIC_ACCESS
from app.core.logger import get_logger
from app.models.upload_models import BlobDescriptor, UploadedFile
from app.storage.base import BlobStore
from app.storage.local_store import LocalBlobStore
from app.storage.s3_store import S3BlobStore
from app.validator.allowed_types import AllowedTypeTable, FileCategory
from app.validator.file_validator import FileValidator

logger = get_logger(__name__)


def create_blob_store(backend: str | None = None) -> BlobStore:
    """Build the BlobStore named by ``backend`` (defaults to ``settings.storage_backend``)."""
    backend = (backend or settings.storage_backend).lower()
    if backend == "local":
        return LocalBlobStore()
    if backend == "s3":
        return S3BlobStore()
    raise ValueError(f"Unknown storage backend '{backend}' (expected 'local' or 's3').")


class UploadService:
    """
    Validates, classifies, optionally converts, and stores one uploaded file.

    Design choices:
    - **All or nothing**: a request produces exactly one stored object or
      an exception; a failed conversion never falls back to storing the
      original bytes.
    - **Strictly sequential**: conversion finishes before storage starts.
    - **One allow-list**: the validator and the classifier share the same
      AllowedTypeTable instance.
    """

    def __init__(
        self,
        allowed_types: AllowedTypeTable | None = None,
        validator: FileValidator | None = None,
        converter: DocumentConverter | None = None,
        store: BlobStore | None = None,
    ) -> None:
        self._allowed_types: AllowedTypeTable = allowed_types or AllowedTypeTable.default()
        self._validator: FileValidator = validator or FileValidator(self._allowed_types)
        self._converter: DocumentConverter = converter or HttpDocumentConverter()
        self._store: BlobStore = store or create_blob_store()

    # ── Public API ─────────────────────────────────────────────────────────────

    async def process(self, upload: UploadedFile) -> BlobDescriptor:
        """
        Run the full pipeline for a single file.

        Returns:
            The BlobDescriptor of the stored object.

        Raises:
            FileValidationError: The file broke the size or type rules.
            ConversionError:     A document could not be converted.
            StorageError:        The storage backend failed.
        """
        self._validator.validate(upload)

        category = self._allowed_types.classify(upload.content_type)
        logger.info(
            "'%s' (%s, %d bytes) classified as %s.",
            upload.filename,
            upload.content_type,
            upload.size,
            category.value,
        )

        # Only a file that passed validation is ever loaded into memory.
        content = await upload.read()

        if category is FileCategory.DOCUMENT:
            return await self._convert_and_store(upload, content)
        return await self._store_original(upload, content)

    # ── Internals ──────────────────────────────────────────────────────────────

    async def _convert_and_store(self, upload: UploadedFile, content: bytes) -> BlobDescriptor:
        result = await self._converter.convert(
            content,
            upload.content_type,
            upload.filename,
        )
        # Storage backends are blocking; keep them off the event loop.
        return await asyncio.to_thread(
            self._store.store,
            result.filename,
            result.markdown,
            PUBLIC_ACCESS,
            MARKDOWN_CONTENT_TYPE,
        )

    async def _store_original(self, upload: UploadedFile, content: bytes) -> BlobDescriptor:
        return await asyncio.to_thread(
            self._store.store,
            upload.filename,
            content,
            PUBLIC_ACCESS,
        )


# ── Module-level singleton ─────────────────────────────────────────────────────
# Controllers resolve this instance through get_upload_service(). Tests
# construct UploadService directly with injected mocks, or override the
# dependency on the app.

upload_service = UploadService()


def get_upload_service() -> UploadService:
    """FastAPI dependency returning the shared UploadService."""
    return upload_service
