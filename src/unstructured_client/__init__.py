"""Unstructured client - partition documents with the Unstructured API."""
from unstructured_client._version import __version__
from unstructured_client.core.client import UnstructuredClient, partition
from unstructured_client.errors import (
    FileIOError,
    InvalidConfiguration,
    InvalidFileName,
    MalformedBody,
    RequestFailed,
    UnstructuredClientError,
)
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
    KnownFormat,
    Metadata,
    UnknownFormat,
    into_common_metadata,
)
from unstructured_client.models.response import (
    PartitionFailure,
    PartitionResponse,
    PartitionSuccess,
)

__all__ = [
    "__version__",
    "partition",
    "UnstructuredClient",
    "ClientConfig",
    "PartitionParameters",
    "Strategy",
    "ChunkingStrategy",
    "OutputFormat",
    "Element",
    "ElementType",
    "CommonMetadata",
    "KnownFormat",
    "UnknownFormat",
    "Metadata",
    "into_common_metadata",
    "PartitionSuccess",
    "PartitionFailure",
    "PartitionResponse",
    "UnstructuredClientError",
    "InvalidConfiguration",
    "InvalidFileName",
    "FileIOError",
    "RequestFailed",
    "MalformedBody",
]
