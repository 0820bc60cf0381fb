"""
tests/validator/test_file_validator.py

Tests for FileValidator.

Pure unit tests — files are built in memory.
"""

from unittest.mock import AsyncMock

import pytest

from app.core.constants import MAX_UPLOAD_SIZE_BYTES
from app.core.exceptions import FileValidationError, InputError
from app.models.upload_models import UploadedFile
from app.validator.allowed_types import AllowedTypeTable
from app.validator.file_validator import FileValidator

SIZE_MESSAGE = "File size should be less than 5MB"
TYPE_MESSAGE = (
    "File type not allowed. Allowed types: "
    "jpg, jpeg, png, doc, docx, ppt, pptx, pdf, xls, xlsx, odt, ods, odp, txt"
)


# ── Helpers ────────────────────────────────────────────────────────────────────

def upload(size: int = 10, content_type: str = "image/png") -> UploadedFile:
    """A file of the given size whose payload is never needed by the validator."""
    return UploadedFile(filename="f.png", content_type=content_type, size=size, reader=AsyncMock())


# ── Tests ──────────────────────────────────────────────────────────────────────

class TestFileValidator:

    def test_valid_file_is_returned_unchanged(self) -> None:
        f = upload()
        assert FileValidator().validate(f) is f

    def test_exactly_five_mib_is_accepted(self) -> None:
        assert FileValidator().violations(upload(size=MAX_UPLOAD_SIZE_BYTES)) == []

    @pytest.mark.parametrize("content_type", ["image/png", "application/pdf", "video/mp4"])
    def test_one_byte_over_limit_is_rejected_for_any_type(self, content_type: str) -> None:
        messages = FileValidator().violations(upload(MAX_UPLOAD_SIZE_BYTES + 1, content_type))
        assert SIZE_MESSAGE in messages

    @pytest.mark.parametrize("content_type", ["image/gif", "application/zip", "", "IMAGE/PNG"])
    def test_types_outside_the_table_are_rejected(self, content_type: str) -> None:
        assert FileValidator().violations(upload(content_type=content_type)) == [TYPE_MESSAGE]

    def test_both_violations_are_reported_in_order(self) -> None:
        with pytest.raises(FileValidationError) as exc_info:
            FileValidator().validate(upload(MAX_UPLOAD_SIZE_BYTES + 1, "image/gif"))

        assert exc_info.value.messages == [SIZE_MESSAGE, TYPE_MESSAGE]
        assert str(exc_info.value) == f"{SIZE_MESSAGE}, {TYPE_MESSAGE}"

    def test_validation_error_is_an_input_error(self) -> None:
        with pytest.raises(InputError):
            FileValidator().validate(upload(content_type="image/gif"))

    def test_custom_table_and_limit(self) -> None:
        validator = FileValidator(
            AllowedTypeTable(extensions={"csv": "text/csv"}),
            max_size=4,
        )

        assert validator.violations(
            UploadedFile.from_bytes("a.csv", "text/csv", b"1234")
        ) == []
        assert validator.violations(upload(size=5, content_type="text/csv")) == [SIZE_MESSAGE]
        assert validator.type_not_allowed_message == "File type not allowed. Allowed types: csv"

    def test_payload_is_not_read_during_validation(self) -> None:
        f = upload(size=MAX_UPLOAD_SIZE_BYTES + 1)

        with pytest.raises(FileValidationError):
            FileValidator().validate(f)

        f.reader.assert_not_called()
