"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
"""

from typing import List


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Client-side errors ─────────────────────────────────────────────────────────

class InputError(AppBaseException):
    """Base class for errors caused by bad client input (reported as 400)."""


class FileValidationError(InputError):
    """
    Raised when an uploaded file breaks one or more upload rules.

    ``messages`` holds every violated rule; ``str(exc)`` joins them the way
    they are reported to the caller.
    """

    def __init__(self, messages: List[str]) -> None:
        self.messages: List[str] = list(messages)
        super().__init__(", ".join(self.messages))


# ── Upstream errors ────────────────────────────────────────────────────────────

class ConversionError(AppBaseException):
    """Raised when the document-to-markdown service fails or is unreachable."""


class StorageError(AppBaseException):
    """Raised when the blob storage backend rejects or fails a write."""
