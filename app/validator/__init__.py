"""app/validator/__init__.py — public API of the validator package."""

from app.validator.allowed_types import AllowedTypeTable, FileCategory
from app.validator.file_validator import FileValidator

__all__ = [
    "AllowedTypeTable",
    "FileCategory",
    "FileValidator",
]
