"""
app/api/upload_controller.py

Handles incoming requests to POST /api/files/upload.

This layer is responsible only for HTTP concerns:
  - Rejecting callers without a session before the body is touched.
  - Rejecting empty bodies and forms that carry no 'file' part.
  - Delegating validation, conversion and storage to UploadService.
  - Translating service-level errors into the coarse caller-facing
    messages; details go to the server log only.

Responses:
  200  The file (or its Markdown conversion) was stored.  Body is the
       storage descriptor: url, downloadUrl, pathname, contentType,
       contentDisposition.
  400  Empty body, no 'file' part, or the file broke the size/type rules.
  401  No valid session.
  500  The document could not be converted, or anything else went wrong.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core.constants import (
    MSG_CONVERSION_FAILED,
    MSG_EMPTY_BODY,
    MSG_NO_FILE,
    MSG_PROCESSING_FAILED,
    MSG_UNAUTHORIZED,
)
from app.core.exceptions import ConversionError, FileValidationError
from app.core.logger import get_logger
from app.models.upload_models import BlobDescriptor, ErrorResponse, Session, UploadedFile
from app.services.auth_service import get_session
from app.services.upload_service import UploadService, get_upload_service

logger = get_logger(__name__)

router = APIRouter(prefix="/api/files", tags=["Files"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


def _has_body(request: Request) -> bool:
    """
    Whether the request announces a body, judged from its headers alone.

    A request with neither Content-Length nor Transfer-Encoding has no body.
    """
    length = request.headers.get("content-length")
    if length is not None:
        try:
            return int(length) > 0
        except ValueError:
            return True
    return "transfer-encoding" in request.headers


def _part_size(part: StarletteUploadFile) -> int:
    """Size of an uploaded part in bytes, measured without reading it."""
    if part.size is not None:
        return part.size
    position = part.file.tell()
    part.file.seek(0, 2)
    size = part.file.tell()
    part.file.seek(position)
    return size


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.post(
    "/upload",
    response_model=BlobDescriptor,
    responses=_ERROR_RESPONSES,
    summary="Upload an image or a document",
)
async def upload(
    request: Request,
    session: Optional[Session] = Depends(get_session),
    service: UploadService = Depends(get_upload_service),
) -> JSONResponse:
    """
    Accepts multipart/form-data with a single 'file' part:

        curl -H "Authorization: Bearer $TOKEN" -F "file=@report.docx" .../api/files/upload

    Images (JPEG, PNG) are stored as uploaded.  Office documents, PDFs and
    plain text are converted to Markdown and only the Markdown is stored,
    under the original name truncated at its first dot plus '.md'.
    """
    # ── 1. Session ─────────────────────────────────────────────────────────────
    if session is None:
        logger.warning("Upload rejected — no session.")
        return _err(MSG_UNAUTHORIZED, status=401)

    # ── 2. Body ────────────────────────────────────────────────────────────────
    if not _has_body(request):
        return _err(MSG_EMPTY_BODY)

    try:
        # ── 3. Parse multipart form and pick out the file ──────────────────────
        # The form parser spools parts to temporary files; the part stays
        # open (and unread) until the service has validated it.
        async with request.form() as form:
            part = form.get("file")
            if not isinstance(part, StarletteUploadFile):
                return _err(MSG_NO_FILE)

            uploaded = UploadedFile(
                filename=part.filename or "",
                content_type=part.content_type or "",
                size=_part_size(part),
                reader=part.read,
            )

            logger.info(
                "Upload received from user '%s' — '%s' (%s, %d bytes).",
                session.user_id,
                uploaded.filename,
                uploaded.content_type,
                uploaded.size,
            )

            # ── 4. Delegate to service ─────────────────────────────────────────
            descriptor = await service.process(uploaded)

    except FileValidationError as exc:
        logger.warning("Upload rejected — %s", exc)
        return _err(str(exc))

    except ConversionError as exc:
        logger.exception("Error converting document to markdown: %s", exc)
        return _err(MSG_CONVERSION_FAILED, status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to process request: %s", exc)
        return _err(MSG_PROCESSING_FAILED, status=500)

    logger.info("Upload stored — %s", descriptor.url)
    return JSONResponse(status_code=200, content=descriptor.model_dump(by_alias=True))
