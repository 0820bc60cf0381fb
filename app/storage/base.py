"""
app/storage/base.py

Abstract interface for the blob storage layer.

Design goals:
  - Services depend only on this interface, never on boto3 or the filesystem.
  - Every backend returns the same BlobDescriptor shape so the controller
    can echo it to the caller unchanged.
"""

from __future__ import annotations

import mimetypes
import posixpath
from abc import ABC, abstractmethod
from typing import Optional, Union
from urllib.parse import quote

from app.core.constants import PUBLIC_ACCESS
from app.core.exceptions import StorageError
from app.models.upload_models import BlobDescriptor

BlobContent = Union[bytes, str]

DEFAULT_BINARY_CONTENT_TYPE = "application/octet-stream"
DEFAULT_TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# Leading bytes of the binary formats we recognise without trusting the key.
_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
)


# ── Shared helpers ─────────────────────────────────────────────────────────────

def guess_content_type(key: str, content: BlobContent) -> str:
    """
    Infer a content type when the caller did not supply one.

    Order: text payload → magic-byte sniffing → key extension → octet-stream.
    """
    if isinstance(content, str):
        return DEFAULT_TEXT_CONTENT_TYPE

    for signature, content_type in _SIGNATURES:
        if content.startswith(signature):
            return content_type

    guessed, _ = mimetypes.guess_type(key)
    return guessed or DEFAULT_BINARY_CONTENT_TYPE


def to_bytes(content: BlobContent) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else content


def check_access(access: str) -> None:
    if access != PUBLIC_ACCESS:
        raise StorageError(f"Unsupported access level '{access}' (only '{PUBLIC_ACCESS}').")


def content_disposition(key: str) -> str:
    """
    ``inline`` disposition naming the key's basename.

    Backslashes and quotes are escaped inside the quoted ``filename``;
    non-ASCII names also get an RFC 5987 ``filename*`` parameter.
    """
    name = posixpath.basename(key)
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    value = f'inline; filename="{escaped}"'
    if not name.isascii():
        value += f"; filename*=UTF-8''{quote(name, safe='')}"
    return value


def build_descriptor(base_url: str, key: str, content_type: str) -> BlobDescriptor:
    """
    Assemble the descriptor for an object stored under ``key``.

    The key is percent-encoded in the URL so names holding ``#``, ``?``,
    ``%`` or spaces still point at the stored object.
    """
    url = f"{base_url}/{quote(key)}"
    return BlobDescriptor(
        url=url,
        download_url=f"{url}?download=1",
        pathname=key,
        content_type=content_type,
        content_disposition=content_disposition(key),
    )


# ── Abstract base ──────────────────────────────────────────────────────────────

class BlobStore(ABC):
    """
    Contract every blob-storage backend must fulfil.

    Concrete implementations (LocalBlobStore, S3BlobStore) wrap a specific
    backend and translate its API to this interface.
    """

    @abstractmethod
    def store(
        self,
        key: str,
        content: BlobContent,
        access: str = PUBLIC_ACCESS,
        content_type: Optional[str] = None,
    ) -> BlobDescriptor:
        """
        Write ``content`` under ``key``, overwriting any existing object.

        Args:
            key          : Object name; used verbatim.
            content      : Bytes, or text which is stored UTF-8 encoded.
            access       : Visibility of the object. Only ``"public"`` is supported.
            content_type : Explicit content type. When None the backend infers
                           one from the payload (see ``guess_content_type``).

        Returns:
            BlobDescriptor with the object's public URL.

        Raises:
            StorageError: If the key is unusable or the backend write fails.
        """
