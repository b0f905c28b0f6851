"""Document element models."""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

from unstructured_client.models.metadata import (
    CommonMetadata,
    KnownFormat,
    Metadata,
    UnknownFormat,
    into_common_metadata,
    resolve_metadata,
)


class ElementType(str, Enum):
    """Element type tags returned by the service."""
    FORMULA = "Formula"
    FIGURE_CAPTION = "FigureCaption"
    # Multiple well-formed sentences; excludes titles, headers and captions
    NARRATIVE_TEXT = "NarrativeText"
    LIST_ITEM = "ListItem"
    TITLE = "Title"
    ADDRESS = "Address"
    EMAIL_ADDRESS = "EmailAddress"
    IMAGE = "Image"
    PAGE_BREAK = "PageBreak"
    TABLE = "Table"
    HEADER = "Header"
    FOOTER = "Footer"
    CODE_SNIPPET = "CodeSnippet"
    PAGE_NUMBER = "PageNumber"
    UNCATEGORIZED_TEXT = "UncategorizedText"
    # Only produced when chunking is requested
    COMPOSITE_ELEMENT = "CompositeElement"


class Element(BaseModel):
    """One unit of extracted document content.

    ``metadata`` validates from either the service's flat object or the
    nested shape of ``model_dump``. :meth:`to_dict` returns the flat one.
    """

    type: ElementType
    element_id: str
    text: str
    metadata: Metadata | None = None

    @field_validator("metadata", mode="before")
    @classmethod
    def _resolve_metadata(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        # Output of model_dump rather than the wire's flat object
        if isinstance(value.get("metadata"), dict):
            if set(value) == {"format", "metadata"}:
                return KnownFormat.model_validate(value)
            if set(value) == {"metadata"}:
                return UnknownFormat.model_validate(value)
        return resolve_metadata(value)

    @property
    def common_metadata(self) -> CommonMetadata | None:
        """Common metadata fields, or None if the element has no metadata."""
        if self.metadata is None:
            return None
        return into_common_metadata(self.metadata)

    def to_dict(self) -> dict[str, Any]:
        """Return the element in the service's JSON shape."""
        return {
            "type": self.type.value,
            "element_id": self.element_id,
            "text": self.text,
            "metadata": self.metadata.to_dict() if self.metadata else None,
        }
