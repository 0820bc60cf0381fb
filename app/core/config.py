"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; Docker Compose injects these at runtime.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "File Upload Service"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: Optional[str] = None           # overrides debug, e.g. "WARNING"

    # ── Conversion service ─────────────────────────────────────────────────────
    conversion_service_url: str = "http://localhost:8490/process_file"
    conversion_timeout_seconds: float = 5.0   # httpx's own default

    # ── Blob storage ───────────────────────────────────────────────────────────
    storage_backend: str = "local"            # "local" or "s3"
    blob_storage_dir: str = "./data/blobs"
    public_base_url: str = "http://localhost:8000"

    s3_bucket: str = ""
    s3_region: Optional[str] = None
    s3_endpoint_url: Optional[str] = None
    s3_access_key: Optional[str] = None
    s3_secret_key: Optional[str] = None
    s3_public_base_url: Optional[str] = None

    # ── Auth (JWT sessions) ────────────────────────────────────────────────────
    jwt_secret_key: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single shared instance — import this everywhere.
settings = Settings()
