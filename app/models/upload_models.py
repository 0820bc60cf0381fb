"""
app/models/upload_models.py

DTOs for the upload flow.

The request has no pydantic DTO — the controller reads the multipart form
directly and hands the pipeline an ``UploadedFile``. Response shapes and
the resolved session are pydantic models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class UploadedFile:
    """
    A single file extracted from the multipart form.

    The payload is not held here: ``read()`` fetches it on demand, so the
    size can be checked before anything is loaded into memory.

    Attributes:
        filename     : Name supplied by the client (may contain several dots).
        content_type : MIME type declared by the client.
        size         : Payload size in bytes, as measured by the form parser.
        reader       : Coroutine function returning the payload bytes.
    """

    filename: str
    content_type: str
    size: int
    reader: Callable[[], Awaitable[bytes]] = field(compare=False, repr=False)

    async def read(self) -> bytes:
        return await self.reader()

    @classmethod
    def from_bytes(cls, filename: str, content_type: str, content: bytes) -> "UploadedFile":
        """Wrap an in-memory payload."""

        async def _read() -> bytes:
            return content

        return cls(filename=filename, content_type=content_type, size=len(content), reader=_read)


class BlobDescriptor(BaseModel):
    """
    Result of a successful write to blob storage, echoed to the caller.

        {
            "url": "http://localhost:8000/blobs/report.md",
            "downloadUrl": "http://localhost:8000/blobs/report.md?download=1",
            "pathname": "report.md",
            "contentType": "text",
            "contentDisposition": "inline; filename=\"report.md\""
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str
    download_url: str = Field(alias="downloadUrl")
    pathname: str
    content_type: str = Field(alias="contentType")
    content_disposition: str = Field(alias="contentDisposition")


class ErrorResponse(BaseModel):
    """Body of every failed request: ``{"error": "..."}``."""

    error: str


class Session(BaseModel):
    """Authenticated caller resolved from the session token."""

    user_id: str
    email: Optional[str] = None
