"""Partition parameters and client configuration."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Strategy(str, Enum):
    """Strategy used for partitioning PDFs and images."""
    FAST = "fast"
    HI_RES = "hi_res"
    AUTO = "auto"
    OCR_ONLY = "ocr_only"


class ChunkingStrategy(str, Enum):
    """Strategy used to chunk elements after partitioning."""
    BASIC = "basic"
    BY_PAGE = "by_page"
    BY_SIMILARITY = "by_similarity"
    BY_TITLE = "by_title"


class OutputFormat(str, Enum):
    """Format of the service response."""
    APPLICATION_JSON = "application/json"
    TEXT_CSV = "text/csv"


class PartitionParameters(BaseModel):
    """Options sent with a partition request.

    Instances are immutable; use ``model_copy(update=...)`` to derive one.
    """

    model_config = ConfigDict(frozen=True)

    # Partitioning
    coordinates: bool = False
    encoding: str | None = None
    extract_image_block_types: tuple[str, ...] = ()
    gz_uncompressed_content_type: str | None = None
    hi_res_model_name: str | None = None
    include_page_breaks: bool = False
    languages: tuple[str, ...] = ()
    output_format: OutputFormat = OutputFormat.APPLICATION_JSON
    skip_infer_table_types: tuple[str, ...] = ()
    starting_page_number: int | None = None
    strategy: Strategy = Strategy.AUTO
    unique_element_ids: bool = False
    xml_keep_tags: bool = False

    # Chunking, ignored by the service unless chunking_strategy is set
    chunking_strategy: ChunkingStrategy | None = None
    combine_under_n_chars: int | None = None
    include_orig_elements: bool = True
    max_characters: int | None = None
    multipage_sections: bool = True
    new_after_n_chars: int | None = None
    overlap: int = 0
    overlap_all: bool = False
    similarity_threshold: float | None = None

    @property
    def chunking_enabled(self) -> bool:
        return self.chunking_strategy is not None

    @classmethod
    def for_chunking(cls) -> "PartitionParameters":
        """Preset for chunked output suited to RAG pipelines."""
        return cls(
            chunking_strategy=ChunkingStrategy.BY_TITLE,
            max_characters=1500,
            new_after_n_chars=1000,
            combine_under_n_chars=500,
        )

    @classmethod
    def for_hi_res(cls) -> "PartitionParameters":
        """Preset for layout-aware partitioning with bounding boxes."""
        return cls(strategy=Strategy.HI_RES, coordinates=True)


DEFAULT_BASE_URL = "http://localhost:8000"
PARTITION_PATH = "/general/v0/general"
API_KEY_HEADER = "unstructured-api-key"


class ClientConfig(BaseModel):
    """Connection settings fixed for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None
    api_key_header: str = API_KEY_HEADER
    user_agent: str | None = None

    # Transport
    timeout_seconds: float | None = 300
