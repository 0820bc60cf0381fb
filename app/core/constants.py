"""
app/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables.
"""

from types import MappingProxyType
from typing import Mapping

# ── Upload limits ──────────────────────────────────────────────────────────────

#: Largest accepted upload, in bytes (5 MiB inclusive).
MAX_UPLOAD_SIZE_BYTES: int = 5 * 1024 * 1024

# ── Allowed file types ─────────────────────────────────────────────────────────

#: Extension → canonical MIME type. Insertion order is the order shown to
#: callers in the "File type not allowed" message.
ALLOWED_EXTENSIONS: Mapping[str, str] = MappingProxyType(
    {
        # images
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        # documents
        "doc": "application/msword",
        "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "ppt": "application/vnd.ms-powerpoint",
        "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "pdf": "application/pdf",
        "xls": "application/vnd.ms-excel",
        "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "odt": "application/vnd.oasis.opendocument.text",
        "ods": "application/vnd.oasis.opendocument.spreadsheet",
        "odp": "application/vnd.oasis.opendocument.presentation",
        "txt": "text/plain",
    }
)

#: MIME types stored as-is; every other allow-listed type is a document.
IMAGE_CONTENT_TYPES: frozenset = frozenset({"image/jpeg", "image/png"})

# ── Storage ────────────────────────────────────────────────────────────────────

#: The only access level the storage backends accept.
PUBLIC_ACCESS: str = "public"

#: Content type attached to converted Markdown artifacts.
MARKDOWN_CONTENT_TYPE: str = "text"

#: URL prefix under which the local blob store is served.
BLOB_URL_PREFIX: str = "/blobs"

# ── Caller-facing error messages ───────────────────────────────────────────────

MSG_UNAUTHORIZED = "Unauthorized"
MSG_EMPTY_BODY = "Request body is empty"
MSG_NO_FILE = "No file uploaded"
MSG_FILE_TOO_LARGE = "File size should be less than 5MB"
MSG_CONVERSION_FAILED = "Failed to convert document to markdown"
MSG_PROCESSING_FAILED = "Failed to process request"
