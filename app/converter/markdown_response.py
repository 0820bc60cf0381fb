"""
app/converter/markdown_response.py

Interprets the body returned by the conversion service.

The service normally answers ``{"markdown": "..."}`` but some deployments
answer with the Markdown itself as plain text. The body is therefore read
into one of two tagged results:

    ParsedMarkdown  — a JSON object with a non-empty string ``markdown`` field
    RawFallback     — anything else; the raw body is used as the Markdown

Invalid JSON and JSON without a usable ``markdown`` field both land on
RawFallback. That is intentional and kept on one explicit branch.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ParsedMarkdown:
    """Markdown taken from the ``markdown`` field of a JSON body."""

    text: str


@dataclass(frozen=True)
class RawFallback:
    """
    The raw response body, used verbatim.

    ``reason`` records why the JSON route was not taken — for logging only.
    """

    text: str
    reason: str


MarkdownResponse = Union[ParsedMarkdown, RawFallback]


def _decode_json(body: str) -> tuple[bool, object]:
    try:
        return True, json.loads(body)
    except ValueError:
        return False, None


def parse_markdown_response(body: str) -> MarkdownResponse:
    """Classify a 2xx conversion-service body as ParsedMarkdown or RawFallback."""
    ok, payload = _decode_json(body)
    if not ok:
        return RawFallback(text=body, reason="body is not JSON")

    if not isinstance(payload, dict):
        return RawFallback(text=body, reason="JSON body is not an object")

    markdown = payload.get("markdown")
    if isinstance(markdown, str) and markdown:
        return ParsedMarkdown(text=markdown)

    return RawFallback(text=body, reason="JSON body has no 'markdown' content")
