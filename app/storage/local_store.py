"""
app/storage/local_store.py

Filesystem implementation of the BlobStore interface.

Objects are written under a single root directory which ``app.main``
serves at ``/blobs``; the returned URL points there.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from app.core.config import settings
from app.core.constants import BLOB_URL_PREFIX, PUBLIC_ACCESS
from app.core.exceptions import StorageError
from app.core.logger import get_logger
from app.models.upload_models import BlobDescriptor
from app.storage.base import (
    BlobContent,
    BlobStore,
    build_descriptor,
    check_access,
    guess_content_type,
    to_bytes,
)

logger = get_logger(__name__)


class LocalBlobStore(BlobStore):
    """BlobStore backed by a directory on local disk."""

    def __init__(
        self,
        root_dir: str | None = None,
        public_base_url: str | None = None,
    ) -> None:
        """
        Args:
            root_dir        : Directory objects are written to.
                              Defaults to ``settings.blob_storage_dir``.
            public_base_url : Origin prefixed to ``/blobs/<key>`` in URLs.
                              Defaults to ``settings.public_base_url``.
        """
        self._root = Path(root_dir or settings.blob_storage_dir).resolve()
        self._base_url = (public_base_url or settings.public_base_url).rstrip("/")

        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(
                f"Failed to initialise blob directory '{self._root}': {exc}"
            ) from exc

        logger.info("LocalBlobStore ready — root=%s", self._root)

    @property
    def root(self) -> Path:
        return self._root

    # ── BlobStore interface ────────────────────────────────────────────────────

    def store(
        self,
        key: str,
        content: BlobContent,
        access: str = PUBLIC_ACCESS,
        content_type: Optional[str] = None,
    ) -> BlobDescriptor:
        check_access(access)
        target = self._resolve(key)
        resolved_type = content_type or guess_content_type(key, content)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(to_bytes(content))
        except OSError as exc:
            raise StorageError(f"write failed for '{key}': {exc}") from exc

        logger.debug("Stored '%s' (%s) at %s.", key, resolved_type, target)
        return build_descriptor(
            base_url=f"{self._base_url}{BLOB_URL_PREFIX}",
            key=key,
            content_type=resolved_type,
        )

    # ── Internals ──────────────────────────────────────────────────────────────

    def _resolve(self, key: str) -> Path:
        """Map ``key`` to a path inside the root; reject keys that escape it."""
        if not key or key.startswith(("/", "\\")):
            raise StorageError(f"Invalid blob key '{key}'.")

        target = (self._root / key).resolve()
        if target == self._root or self._root not in target.parents:
            raise StorageError(f"Blob key '{key}' escapes the storage directory.")
        return target
