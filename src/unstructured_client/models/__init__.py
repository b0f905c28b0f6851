"""Unstructured client data models."""
from unstructured_client.models.config import (
    ChunkingStrategy,
    ClientConfig,
    OutputFormat,
    PartitionParameters,
    Strategy,
)
from unstructured_client.models.element import Element, ElementType
from unstructured_client.models.metadata import (
    CommonMetadata,
    EmailMetadata,
    EpubMetadata,
    ExcelMetadata,
    ExtendedMetadata,
    FileFormat,
    HtmlMetadata,
    KnownFormat,
    Metadata,
    MsgMetadata,
    PagedDocument,
    UnknownFormat,
    WordDocMetadata,
    into_common_metadata,
    resolve_metadata,
)
from unstructured_client.models.response import (
    PartitionFailure,
    PartitionResponse,
    PartitionSuccess,
)

__all__ = [
    "ChunkingStrategy",
    "ClientConfig",
    "OutputFormat",
    "PartitionParameters",
    "Strategy",
    "Element",
    "ElementType",
    "CommonMetadata",
    "EmailMetadata",
    "EpubMetadata",
    "ExcelMetadata",
    "ExtendedMetadata",
    "FileFormat",
    "HtmlMetadata",
    "KnownFormat",
    "Metadata",
    "MsgMetadata",
    "PagedDocument",
    "UnknownFormat",
    "WordDocMetadata",
    "into_common_metadata",
    "resolve_metadata",
    "PartitionFailure",
    "PartitionResponse",
    "PartitionSuccess",
]
