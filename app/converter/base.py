"""
app/converter/base.py

Abstract interface for the document → Markdown conversion layer.

Services depend only on this interface, never on the HTTP client that
talks to the conversion service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

MARKDOWN_EXTENSION = ".md"


def derive_markdown_filename(filename: str) -> str:
    """
    Storage key for a converted document.

    Everything from the FIRST dot onwards is dropped, so
    ``report.v2.final.docx`` becomes ``report.md`` (not ``report.v2.final.md``).
    """
    return f"{filename.split('.')[0]}{MARKDOWN_EXTENSION}"


@dataclass(frozen=True)
class ConversionResult:
    """
    Output of a successful conversion.

    Attributes:
        markdown : The converted text.
        filename : Storage key derived from the original filename.
    """

    markdown: str
    filename: str


class DocumentConverter(ABC):
    """Contract every conversion backend must fulfil."""

    @abstractmethod
    async def convert(
        self,
        content: bytes,
        content_type: str,
        filename: str,
    ) -> ConversionResult:
        """
        Convert a document to Markdown.

        Args:
            content      : Raw bytes of the uploaded document.
            content_type : MIME type declared by the uploader.
            filename     : Original filename, forwarded to the backend.

        Returns:
            ConversionResult with the Markdown and the derived ``.md`` filename.

        Raises:
            ConversionError: The backend failed or could not be reached.
        """
