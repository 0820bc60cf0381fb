"""
app/validator/allowed_types.py

The upload allow-list and the image/document classifier built on it.

An ``AllowedTypeTable`` is an immutable value: it is built once (by default
from ``app.core.constants``) and injected into the validator and the upload
service, so nothing reads a module-level table at request time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping

from app.core.constants import ALLOWED_EXTENSIONS, IMAGE_CONTENT_TYPES


class FileCategory(str, Enum):
    """Which pipeline branch an allow-listed file takes."""

    IMAGE = "image"
    DOCUMENT = "document"


@dataclass(frozen=True)
class AllowedTypeTable:
    """
    Extension → MIME type allow-list, partitioned into images and documents.

    Every MIME value that is in ``image_types`` is an image; every other
    value is a document. Types absent from the table are never classified —
    the validator rejects them first.
    """

    extensions: Mapping[str, str]
    image_types: FrozenSet[str] = field(default=IMAGE_CONTENT_TYPES)

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate the table afterwards.
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))
        object.__setattr__(self, "image_types", frozenset(self.image_types))

    @classmethod
    def default(cls) -> "AllowedTypeTable":
        return cls(extensions=ALLOWED_EXTENSIONS)

    # ── Lookups ────────────────────────────────────────────────────────────────

    @property
    def extension_list(self) -> List[str]:
        """Extensions in table order, as listed in rejection messages."""
        return list(self.extensions.keys())

    @property
    def content_types(self) -> FrozenSet[str]:
        return frozenset(self.extensions.values())

    @property
    def document_types(self) -> FrozenSet[str]:
        return self.content_types - self.image_types

    def is_allowed(self, content_type: str) -> bool:
        return content_type in self.content_types

    def is_document(self, content_type: str) -> bool:
        return content_type in self.document_types

    # ── Classifier ─────────────────────────────────────────────────────────────

    def classify(self, content_type: str) -> FileCategory:
        """Return the branch for an allow-listed MIME type."""
        if self.is_document(content_type):
            return FileCategory.DOCUMENT
        return FileCategory.IMAGE
