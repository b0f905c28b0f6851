"""Element metadata models.

Metadata on the wire is a single flat JSON object. Its ``filetype`` field
selects an extended record (page number for paged documents, sender and
subject for emails, ...). Every extended record embeds the same
:class:`CommonMetadata`, and values whose ``filetype`` is missing or not
recognised decode as :class:`UnknownFormat` holding only the common fields.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field, NonNegativeInt, ValidationError, model_validator

from unstructured_client.utils.logging import get_logger

logger = get_logger("metadata")


class FileFormat(str, Enum):
    """Known ``filetype`` discriminator values."""
    PDF = "application/pdf"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    PPTX = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
    XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    EML = "message/rfc822"
    MSG = "application/vnd.ms-outlook"
    DOC = "application/msword"
    HTML = "text/html"
    EPUB = "application/epub+zip"


# Alternative spellings the service uses for spreadsheets.
FILETYPE_ALIASES: dict[str, FileFormat] = {
    "sheet": FileFormat.XLSX,
    "excel": FileFormat.XLSX,
}


def lookup_file_format(filetype: Any) -> FileFormat | None:
    """Resolve a ``filetype`` value to a known format, or None."""
    if not isinstance(filetype, str):
        return None
    if filetype in FILETYPE_ALIASES:
        return FILETYPE_ALIASES[filetype]
    try:
        return FileFormat(filetype)
    except ValueError:
        return None


class CommonMetadata(BaseModel):
    """Metadata fields shared by elements of every file type.

    Unknown fields are ignored so newer service versions can add fields
    without breaking decoding.
    """

    filename: str | None = None
    file_directory: str | None = None
    last_modified: str | None = None
    filetype: str | None = None

    # XY bounding box of the element. hi_res sends an object with
    # "points", "system", "layout_width" and "layout_height".
    coordinates: dict[str, Any] | str | None = None

    # Hierarchy
    parent_id: str | None = None
    category_depth: NonNegativeInt | None = None

    text_as_html: str | None = None

    # Ordered by probability of being the primary language
    languages: list[str] | None = None

    # Lists from the current service, single strings from older ones
    emphasized_text_contents: list[str] | str | None = None
    emphasized_text_tags: list[str] | str | None = None

    # Set on chunks split from an oversized element
    is_continuation: bool | None = None

    # Class probabilities from the hi_res detection model
    detection_class_prob: list[float] | None = None


class ExtendedMetadata(BaseModel):
    """Base for format-specific metadata records.

    On the wire the common fields sit in the same flat object as the
    format-specific ones; :func:`resolve_metadata` splits them. Validating
    a record directly reads ``common`` as a nested object, which is the
    shape ``model_dump`` produces.
    """

    common: CommonMetadata = Field(default_factory=CommonMetadata)

    @classmethod
    def from_wire(
        cls, data: dict[str, Any], common: CommonMetadata | None = None
    ) -> "ExtendedMetadata":
        """Validate a flat wire object.

        A ``common`` key in the object is an unknown field like any other
        and is ignored.
        """
        if common is None:
            common = CommonMetadata.model_validate(data)
        return cls.model_validate({**data, "common": common})

    def to_dict(self) -> dict[str, Any]:
        """Return the flat wire representation."""
        return {
            **self.common.model_dump(),
            **self.model_dump(exclude={"common"}),
        }


class PagedDocument(ExtendedMetadata):
    """Metadata for PDF, DOCX and PPTX documents."""

    page_number: NonNegativeInt | None = None


class ExcelMetadata(ExtendedMetadata):
    """Metadata for XLSX spreadsheets."""

    page_number: NonNegativeInt | None = None
    # Sheet name
    page_name: str | None = None


class EmailMetadata(ExtendedMetadata):
    """Metadata for EML messages."""

    sent_from: str | None = None
    sent_to: str | None = None
    subject: str | None = None


class MsgMetadata(ExtendedMetadata):
    """Metadata for Outlook MSG messages."""

    # Filename the attachment is attached to
    attached_to_filename: str | None = None


class WordDocMetadata(ExtendedMetadata):
    """Metadata for legacy Word documents."""

    page_number: NonNegativeInt | None = None
    # "primary", "even_only" or "first_page"
    header_footer_type: str | None = None


class HtmlMetadata(ExtendedMetadata):
    """Metadata for HTML documents."""

    link_urls: list[str] | None = None
    link_texts: list[str] | None = None


class EpubMetadata(ExtendedMetadata):
    """Metadata for EPUB books."""

    # Section title from the table of contents
    section: str | None = None


FORMAT_RECORDS: dict[FileFormat, type[ExtendedMetadata]] = {
    FileFormat.PDF: PagedDocument,
    FileFormat.DOCX: PagedDocument,
    FileFormat.PPTX: PagedDocument,
    FileFormat.XLSX: ExcelMetadata,
    FileFormat.EML: EmailMetadata,
    FileFormat.MSG: MsgMetadata,
    FileFormat.DOC: WordDocMetadata,
    FileFormat.HTML: HtmlMetadata,
    FileFormat.EPUB: EpubMetadata,
}


class KnownFormat(BaseModel):
    """Metadata whose ``filetype`` selected a format-specific record."""

    format: FileFormat
    metadata: Union[
        PagedDocument,
        ExcelMetadata,
        EmailMetadata,
        MsgMetadata,
        WordDocMetadata,
        HtmlMetadata,
        EpubMetadata,
    ]

    @model_validator(mode="before")
    @classmethod
    def _select_record(cls, data: Any) -> Any:
        # Several records accept the same dict, so pick by format.
        if not isinstance(data, dict) or not isinstance(data.get("metadata"), dict):
            return data
        file_format = lookup_file_format(data.get("format"))
        if file_format is None:
            return data
        record = FORMAT_RECORDS[file_format]
        return {**data, "metadata": record.model_validate(data["metadata"])}

    @model_validator(mode="after")
    def _check_record_matches_format(self) -> "KnownFormat":
        expected = FORMAT_RECORDS[self.format]
        if type(self.metadata) is not expected:
            raise ValueError(
                f"{self.format.value} metadata must be {expected.__name__}, "
                f"got {type(self.metadata).__name__}"
            )
        return self

    def into_common_metadata(self) -> CommonMetadata:
        return self.metadata.common

    def to_dict(self) -> dict[str, Any]:
        data = self.metadata.to_dict()
        if data.get("filetype") is None:
            data["filetype"] = self.format.value
        return data


class UnknownFormat(BaseModel):
    """Metadata with a missing or unrecognised ``filetype``."""

    metadata: CommonMetadata

    def into_common_metadata(self) -> CommonMetadata:
        return self.metadata

    def to_dict(self) -> dict[str, Any]:
        return self.metadata.model_dump()


Metadata = Union[KnownFormat, UnknownFormat]


def resolve_metadata(data: Any) -> Metadata:
    """Decode a flat metadata object into a known or unknown format.

    A known ``filetype`` is decoded into its format-specific record. If the
    record does not validate, or the ``filetype`` is missing or unknown, the
    object is decoded as common metadata only.

    Raises:
        ValidationError: If the object does not even fit the common fields.
        ValueError: If ``data`` is not a JSON object.
    """
    if not isinstance(data, dict):
        raise ValueError(f"metadata must be an object, got {type(data).__name__}")

    common = CommonMetadata.model_validate(data)
    file_format = lookup_file_format(data.get("filetype"))
    if file_format is not None:
        record = FORMAT_RECORDS[file_format]
        try:
            return KnownFormat(format=file_format, metadata=record.from_wire(data, common))
        except ValidationError as e:
            logger.debug(
                "Metadata for %s does not fit %s, decoding as unknown format: %s",
                file_format.value,
                record.__name__,
                e,
            )

    return UnknownFormat(metadata=common)


def into_common_metadata(metadata: Metadata) -> CommonMetadata:
    """Project any metadata value onto its common fields."""
    if isinstance(metadata, KnownFormat):
        return metadata.metadata.common
    if isinstance(metadata, UnknownFormat):
        return metadata.metadata
    raise TypeError(f"Not a metadata value: {type(metadata).__name__}")
