"""
app/validator/file_validator.py

Size and type policy for a single uploaded file.

Both rules are evaluated on every file and all violations are reported
together, joined into one message.
"""

from __future__ import annotations

from typing import List

from app.core.constants import MAX_UPLOAD_SIZE_BYTES, MSG_FILE_TOO_LARGE
from app.core.exceptions import FileValidationError
from app.core.logger import get_logger
from app.models.upload_models import UploadedFile
from app.validator.allowed_types import AllowedTypeTable

logger = get_logger(__name__)


class FileValidator:
    """
    Checks an ``UploadedFile`` against the size ceiling and the allow-list.

    Rules:
        1. ``size <= max_size`` (inclusive).
        2. The declared MIME type is one of the table's values.
    """

    def __init__(
        self,
        allowed_types: AllowedTypeTable | None = None,
        max_size: int = MAX_UPLOAD_SIZE_BYTES,
    ) -> None:
        self.allowed_types: AllowedTypeTable = allowed_types or AllowedTypeTable.default()
        self.max_size: int = max_size

    @property
    def type_not_allowed_message(self) -> str:
        return "File type not allowed. Allowed types: " + ", ".join(
            self.allowed_types.extension_list
        )

    def violations(self, upload: UploadedFile) -> List[str]:
        """Return the message of every rule ``upload`` breaks (empty when valid)."""
        messages: List[str] = []
        if upload.size > self.max_size:
            messages.append(MSG_FILE_TOO_LARGE)
        if not self.allowed_types.is_allowed(upload.content_type):
            messages.append(self.type_not_allowed_message)
        return messages

    def validate(self, upload: UploadedFile) -> UploadedFile:
        """
        Return ``upload`` unchanged when it passes every rule.

        Raises:
            FileValidationError: One or more rules failed; ``messages`` lists them.
        """
        messages = self.violations(upload)
        if messages:
            logger.debug(
                "'%s' (%s, %d bytes) rejected — %d rule(s) failed.",
                upload.filename,
                upload.content_type,
                upload.size,
                len(messages),
            )
            raise FileValidationError(messages)
        return upload
