"""
app/converter/http_converter.py

httpx implementation of the DocumentConverter interface.

Posts the document as multipart form data (field ``file``) to the
configured conversion endpoint and reads the Markdown out of the reply.
"""

from __future__ import annotations

from typing import Optional

import httpx

from app.converter.base import ConversionResult, DocumentConverter, derive_markdown_filename
from app.converter.markdown_response import RawFallback, parse_markdown_response
from app.core.config import settings
from app.core.exceptions import ConversionError
from app.core.logger import get_logger

logger = get_logger(__name__)


class HttpDocumentConverter(DocumentConverter):
    """
    Converter backed by a remote ``/process_file``-style HTTP service.

    A fresh ``httpx.AsyncClient`` is opened per call unless a ``transport``
    is injected (tests pass an ``httpx.MockTransport``). No retries.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            endpoint  : Conversion URL. Defaults to ``settings.conversion_service_url``.
            timeout   : Seconds before the request is abandoned.
                        Defaults to ``settings.conversion_timeout_seconds``.
            transport : Optional httpx transport override.
        """
        self._endpoint: str = endpoint or settings.conversion_service_url
        self._timeout: float = timeout if timeout is not None else settings.conversion_timeout_seconds
        self._transport = transport

    # ── DocumentConverter interface ────────────────────────────────────────────

    async def convert(
        self,
        content: bytes,
        content_type: str,
        filename: str,
    ) -> ConversionResult:
        body = await self._post(content, content_type, filename)

        parsed = parse_markdown_response(body)
        if isinstance(parsed, RawFallback):
            logger.warning(
                "'%s' — using raw conversion response as markdown (%s).",
                filename,
                parsed.reason,
            )

        result = ConversionResult(
            markdown=parsed.text,
            filename=derive_markdown_filename(filename),
        )
        logger.info(
            "'%s' — converted to '%s' (%d chars).",
            filename,
            result.filename,
            len(result.markdown),
        )
        return result

    # ── Internals ──────────────────────────────────────────────────────────────

    async def _post(self, content: bytes, content_type: str, filename: str) -> str:
        """
        Send the document and return the response body as text.

        Raises:
            ConversionError: Transport failure or a non-2xx status.
        """
        files = {"file": (filename, content, content_type)}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self._endpoint, files=files)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ConversionError(
                f"Conversion service unreachable at '{self._endpoint}': {exc}"
            ) from exc

        if not response.is_success:
            raise ConversionError(
                f"Conversion service returned HTTP {response.status_code} for '{filename}'."
            )

        return response.text
