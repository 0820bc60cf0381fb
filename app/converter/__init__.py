"""app/converter/__init__.py — public API of the converter package."""

from app.converter.base import ConversionResult, DocumentConverter, derive_markdown_filename
from app.converter.http_converter import HttpDocumentConverter
from app.converter.markdown_response import ParsedMarkdown, RawFallback, parse_markdown_response

__all__ = [
    "ConversionResult",
    "DocumentConverter",
    "HttpDocumentConverter",
    "ParsedMarkdown",
    "RawFallback",
    "derive_markdown_filename",
    "parse_markdown_response",
]
