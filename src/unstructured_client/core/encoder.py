"""Encode partition parameters as multipart form fields."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from unstructured_client.models.config import PartitionParameters
from unstructured_client.utils.filename import part_filename

FILE_FIELD = "files"
DEFAULT_ENCODING = "utf-8"


class FilePart(BaseModel):
    """The file part of a partition request.

    Only the name is resolved here; the transport reads the bytes.
    """

    model_config = ConfigDict(frozen=True)

    field_name: str = FILE_FIELD
    filename: str
    path: Path


class WireForm(BaseModel):
    """Ordered text fields plus the file part of a partition request."""

    model_config = ConfigDict(frozen=True)

    fields: tuple[tuple[str, str], ...]
    file: FilePart

    def as_dict(self) -> dict[str, str]:
        return dict(self.fields)

    def get(self, name: str) -> str | None:
        for field_name, value in self.fields:
            if field_name == name:
                return value
        return None


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _json_list(values: Sequence[str]) -> str:
    return json.dumps(list(values), separators=(",", ":"), ensure_ascii=False)


def encode_fields(params: PartitionParameters) -> tuple[tuple[str, str], ...]:
    """Encode parameters as ordered ``(name, value)`` string pairs.

    Optional values that are unset are left out, except ``encoding`` which
    falls back to utf-8. Booleans, lists, ``overlap`` and the enums are
    always sent.
    """
    fields: list[tuple[str, str]] = []

    def optional(name: str, value: object) -> None:
        if value is not None:
            fields.append((name, str(value)))

    fields.append(("coordinates", _bool(params.coordinates)))
    fields.append(("encoding", params.encoding or DEFAULT_ENCODING))
    fields.append(("extract_image_block_types", _json_list(params.extract_image_block_types)))
    optional("gz_uncompressed_content_type", params.gz_uncompressed_content_type)
    optional("hi_res_model_name", params.hi_res_model_name)
    fields.append(("include_page_breaks", _bool(params.include_page_breaks)))
    fields.append(("languages", _json_list(params.languages)))
    fields.append(("output_format", params.output_format.value))
    fields.append(("skip_infer_table_types", _json_list(params.skip_infer_table_types)))
    optional("starting_page_number", params.starting_page_number)
    fields.append(("strategy", params.strategy.value))
    fields.append(("unique_element_ids", _bool(params.unique_element_ids)))
    fields.append(("xml_keep_tags", _bool(params.xml_keep_tags)))

    if params.chunking_strategy is not None:
        fields.append(("chunking_strategy", params.chunking_strategy.value))
    optional("combine_under_n_chars", params.combine_under_n_chars)
    fields.append(("include_orig_elements", _bool(params.include_orig_elements)))
    optional("max_characters", params.max_characters)
    fields.append(("multipage_sections", _bool(params.multipage_sections)))
    optional("new_after_n_chars", params.new_after_n_chars)
    fields.append(("overlap", str(params.overlap)))
    fields.append(("overlap_all", _bool(params.overlap_all)))
    optional("similarity_threshold", params.similarity_threshold)

    return tuple(fields)


def encode_form(params: PartitionParameters, file_path: str | Path) -> WireForm:
    """Build the wire form for uploading ``file_path`` with ``params``.

    Raises:
        InvalidFileName: If the file's base name cannot be sent.
    """
    path = Path(file_path)
    return WireForm(
        fields=encode_fields(params),
        file=FilePart(filename=part_filename(path), path=path),
    )
