"""
app/storage/s3_store.py

S3 implementation of the BlobStore interface.

Works against AWS S3 or any S3-compatible service (DigitalOcean Spaces,
MinIO) via ``endpoint_url``. All boto3 details are contained here.
"""

from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.constants import PUBLIC_ACCESS
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


class S3BlobStore(BlobStore):
    """
    BlobStore backed by an S3 bucket.

    Objects are written with ``ACL=public-read``. URLs are built as
    ``<public base>/<bucket>/<key>`` where the public base is
    ``settings.s3_public_base_url`` or, failing that, the endpoint URL.
    """

    def __init__(
        self,
        bucket: str | None = None,
        client: Any = None,
        public_base_url: str | None = None,
    ) -> None:
        """
        Args:
            bucket          : Bucket name. Defaults to ``settings.s3_bucket``.
            client          : Pre-built boto3 S3 client (tests pass a mock).
            public_base_url : Origin used in returned URLs.
        """
        self._bucket = bucket or settings.s3_bucket
        if not self._bucket:
            raise StorageError("S3 storage selected but no bucket is configured.")

        self._client = client or boto3.client(
            "s3",
            region_name=settings.s3_region,
            endpoint_url=settings.s3_endpoint_url,
            aws_access_key_id=settings.s3_access_key,
            aws_secret_access_key=settings.s3_secret_key,
        )

        base = (
            public_base_url
            or settings.s3_public_base_url
            or settings.s3_endpoint_url
            or f"https://s3.{settings.s3_region or 'us-east-1'}.amazonaws.com"
        )
        self._base_url = base.rstrip("/")

        logger.info("S3BlobStore ready — bucket=%s  base_url=%s", self._bucket, self._base_url)

    # ── BlobStore interface ────────────────────────────────────────────────────

    def store(
        self,
        key: str,
        content: BlobContent,
        access: str = PUBLIC_ACCESS,
        content_type: Optional[str] = None,
    ) -> BlobDescriptor:
        check_access(access)
        resolved_type = content_type or guess_content_type(key, content)

        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=to_bytes(content),
                ContentType=resolved_type,
                ACL="public-read",
            )
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"put_object failed for '{key}': {exc}") from exc

        logger.debug("Uploaded '%s' (%s) to bucket '%s'.", key, resolved_type, self._bucket)
        return build_descriptor(
            base_url=f"{self._base_url}/{self._bucket}",
            key=key,
            content_type=resolved_type,
        )
