"""
app/main.py

FastAPI application entry point.

Responsibilities:
  - Create the FastAPI app with metadata from config
  - Register the upload router
  - Serve the local blob directory at /blobs when the local backend is used
  - Add a global exception handler for uncaught AppBaseException
  - Expose a /health endpoint for liveness checks
"""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.upload_controller import router as upload_router
from app.core.config import settings
from app.core.constants import BLOB_URL_PREFIX, MSG_PROCESSING_FAILED
from app.core.exceptions import AppBaseException
from app.core.logger import get_logger

logger = get_logger(__name__)

# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Accepts authenticated file uploads, stores images as-is and "
        "stores documents as Markdown produced by a conversion service."
    ),
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(upload_router)

# ── Public blobs (local backend only) ──────────────────────────────────────────

if settings.storage_backend.lower() == "local":
    Path(settings.blob_storage_dir).mkdir(parents=True, exist_ok=True)
    app.mount(
        BLOB_URL_PREFIX,
        StaticFiles(directory=settings.blob_storage_dir),
        name="blobs",
    )

# ── Global exception handler ───────────────────────────────────────────────────

@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    Logs the detail; the caller only sees the generic message.
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": MSG_PROCESSING_FAILED})


# ── Health endpoint ────────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"], summary="Liveness check")
async def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {"status": "ok", "version": settings.app_version}
