"""Tests for Pydantic models in src/unstructured_client/models/."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

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
    FileFormat,
    HtmlMetadata,
    KnownFormat,
    MsgMetadata,
    PagedDocument,
    UnknownFormat,
    WordDocMetadata,
    into_common_metadata,
    lookup_file_format,
    resolve_metadata,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TestEnums:
    """Tests for the wire tokens of the option enums."""

    def test_strategy_tokens(self):
        assert [s.value for s in Strategy] == ["fast", "hi_res", "auto", "ocr_only"]

    def test_chunking_strategy_tokens(self):
        assert [c.value for c in ChunkingStrategy] == [
            "basic",
            "by_page",
            "by_similarity",
            "by_title",
        ]

    def test_output_format_tokens(self):
        assert OutputFormat.APPLICATION_JSON == "application/json"
        assert OutputFormat.TEXT_CSV == "text/csv"

    def test_enums_are_strings(self):
        assert isinstance(Strategy.AUTO, str)
        assert isinstance(ChunkingStrategy.BASIC, str)

    def test_element_type_count(self):
        assert len(ElementType) == 16


# ---------------------------------------------------------------------------
# PartitionParameters
# ---------------------------------------------------------------------------


class TestPartitionParameters:
    """Tests for the PartitionParameters model."""

    def test_boolean_defaults(self):
        params = PartitionParameters()
        assert params.coordinates is False
        assert params.include_page_breaks is False
        assert params.unique_element_ids is False
        assert params.xml_keep_tags is False
        assert params.overlap_all is False
        assert params.include_orig_elements is True
        assert params.multipage_sections is True

    def test_enum_defaults(self):
        params = PartitionParameters()
        assert params.strategy == Strategy.AUTO
        assert params.output_format == OutputFormat.APPLICATION_JSON

    def test_optional_fields_default_to_none(self):
        params = PartitionParameters()
        assert params.encoding is None
        assert params.gz_uncompressed_content_type is None
        assert params.hi_res_model_name is None
        assert params.starting_page_number is None
        assert params.chunking_strategy is None
        assert params.combine_under_n_chars is None
        assert params.max_characters is None
        assert params.new_after_n_chars is None
        assert params.similarity_threshold is None

    def test_list_fields_default_to_empty(self):
        params = PartitionParameters()
        assert params.extract_image_block_types == ()
        assert params.languages == ()
        assert params.skip_infer_table_types == ()

    def test_list_fields_are_tuples(self):
        params = PartitionParameters(languages=["eng"], skip_infer_table_types=["pdf"])
        assert params.languages == ("eng",)
        assert params.skip_infer_table_types == ("pdf",)
        with pytest.raises(AttributeError):
            params.languages.append("deu")  # type: ignore[attr-defined]

    def test_caller_list_is_copied(self):
        languages = ["eng"]
        params = PartitionParameters(languages=languages)
        languages.append("deu")
        assert params.languages == ("eng",)

    def test_accepts_string_tokens(self):
        params = PartitionParameters(strategy="hi_res", chunking_strategy="by_page")
        assert params.strategy is Strategy.HI_RES
        assert params.chunking_strategy is ChunkingStrategy.BY_PAGE

    def test_rejects_unknown_strategy(self):
        with pytest.raises(ValidationError):
            PartitionParameters(strategy="fastest")

    def test_is_immutable(self):
        params = PartitionParameters()
        with pytest.raises(ValidationError):
            params.coordinates = True

    def test_model_copy_leaves_original_untouched(self):
        params = PartitionParameters()
        derived = params.model_copy(update={"coordinates": True})
        assert derived.coordinates is True
        assert params.coordinates is False

    def test_similarity_threshold_not_range_checked(self):
        params = PartitionParameters(similarity_threshold=1.5)
        assert params.similarity_threshold == 1.5

    def test_chunking_enabled(self):
        assert PartitionParameters().chunking_enabled is False
        assert PartitionParameters(chunking_strategy="basic").chunking_enabled is True

    def test_for_chunking_preset(self):
        params = PartitionParameters.for_chunking()
        assert params.chunking_strategy is ChunkingStrategy.BY_TITLE
        assert params.max_characters == 1500

    def test_for_hi_res_preset(self):
        params = PartitionParameters.for_hi_res()
        assert params.strategy is Strategy.HI_RES
        assert params.coordinates is True


class TestClientConfig:
    """Tests for the ClientConfig model."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == "http://localhost:8000"
        assert config.api_key is None
        assert config.api_key_header == "unstructured-api-key"

    def test_is_immutable(self):
        config = ClientConfig(api_key="secret")
        with pytest.raises(ValidationError):
            config.api_key = "other"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

KNOWN_FORMATS = [
    ("application/pdf", FileFormat.PDF, PagedDocument),
    (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        FileFormat.DOCX,
        PagedDocument,
    ),
    (
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        FileFormat.PPTX,
        PagedDocument,
    ),
    (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        FileFormat.XLSX,
        ExcelMetadata,
    ),
    ("sheet", FileFormat.XLSX, ExcelMetadata),
    ("excel", FileFormat.XLSX, ExcelMetadata),
    ("message/rfc822", FileFormat.EML, EmailMetadata),
    ("application/vnd.ms-outlook", FileFormat.MSG, MsgMetadata),
    ("application/msword", FileFormat.DOC, WordDocMetadata),
    ("text/html", FileFormat.HTML, HtmlMetadata),
    ("application/epub+zip", FileFormat.EPUB, EpubMetadata),
]


class TestResolveMetadata:
    """Tests for filetype-driven metadata decoding."""

    @pytest.mark.parametrize("filetype,file_format,record", KNOWN_FORMATS)
    def test_known_filetype_resolves_to_its_record(self, filetype, file_format, record):
        metadata = resolve_metadata({"filetype": filetype})

        assert isinstance(metadata, KnownFormat)
        assert metadata.format is file_format
        assert type(metadata.metadata) is record
        extra_fields = metadata.metadata.model_dump(exclude={"common"})
        assert all(value is None for value in extra_fields.values())
        assert metadata.metadata.common == CommonMetadata(filetype=filetype)

    def test_pdf_with_all_common_fields(self):
        metadata = resolve_metadata({
            "filetype": "application/pdf",
            "filename": "example.pdf",
            "file_directory": "/documents",
            "last_modified": "2023-10-01",
            "coordinates": "100,100,200,200",
            "parent_id": "1",
            "category_depth": 2,
            "text_as_html": "<p>Example</p>",
            "languages": ["en", "fr"],
            "emphasized_text_contents": "important",
            "emphasized_text_tags": "<b>",
            "is_continuation": False,
            "detection_class_prob": [0.1, 0.9],
            "page_number": 1,
        })

        assert isinstance(metadata, KnownFormat)
        assert metadata.format is FileFormat.PDF
        assert metadata.metadata.page_number == 1
        common = metadata.metadata.common
        assert common.filename == "example.pdf"
        assert common.category_depth == 2
        assert common.languages == ["en", "fr"]
        assert common.detection_class_prob == [0.1, 0.9]
        assert common.is_continuation is False

    def test_email_specific_fields(self):
        metadata = resolve_metadata({
            "filetype": "message/rfc822",
            "sent_from": "alice@example.com",
            "sent_to": "bob@example.com",
            "subject": "Hello",
        })
        assert isinstance(metadata.metadata, EmailMetadata)
        assert metadata.metadata.sent_from == "alice@example.com"
        assert metadata.metadata.subject == "Hello"

    def test_excel_sheet_name(self):
        metadata = resolve_metadata({"filetype": "excel", "page_name": "Sheet1"})
        assert metadata.metadata.page_name == "Sheet1"

    def test_html_links(self):
        metadata = resolve_metadata({
            "filetype": "text/html",
            "link_urls": ["https://example.com"],
            "link_texts": ["Example"],
        })
        assert metadata.metadata.link_urls == ["https://example.com"]
        assert metadata.metadata.link_texts == ["Example"]

    def test_unknown_filetype_falls_back(self):
        metadata = resolve_metadata({
            "filetype": "asdfasdfasdf",
            "filename": "example.pdf",
            "file_directory": "/documents",
            "last_modified": "2023-10-01",
        })

        assert isinstance(metadata, UnknownFormat)
        assert metadata.metadata.filetype == "asdfasdfasdf"
        assert metadata.metadata.filename == "example.pdf"

    def test_missing_filetype_falls_back(self):
        metadata = resolve_metadata({"filename": "notes.txt"})
        assert isinstance(metadata, UnknownFormat)
        assert metadata.metadata.filename == "notes.txt"

    def test_empty_object_is_unknown_format(self):
        metadata = resolve_metadata({})
        assert metadata == UnknownFormat(metadata=CommonMetadata())

    def test_unknown_fields_are_ignored(self):
        metadata = resolve_metadata({
            "filetype": "application/pdf",
            "page_number": 4,
            "new_field_from_newer_server": {"nested": True},
        })
        assert isinstance(metadata, KnownFormat)
        assert metadata.metadata.page_number == 4

    def test_wire_key_named_common_is_ignored(self):
        metadata = resolve_metadata({
            "filetype": "application/pdf",
            "page_number": 3,
            "filename": "a.pdf",
            "common": "x",
        })
        assert isinstance(metadata, KnownFormat)
        assert metadata.metadata.page_number == 3
        assert metadata.metadata.common.filename == "a.pdf"

    def test_wire_object_named_common_does_not_replace_common_fields(self):
        metadata = resolve_metadata({
            "filetype": "application/pdf",
            "filename": "a.pdf",
            "common": {"filename": "other.pdf", "parent_id": "p9"},
        })
        assert isinstance(metadata, KnownFormat)
        assert metadata.metadata.common.filename == "a.pdf"
        assert metadata.metadata.common.parent_id is None

    def test_hi_res_coordinates_and_emphasis(self):
        coordinates = {
            "points": [[0.0, 0.0], [0.0, 10.0], [20.0, 10.0], [20.0, 0.0]],
            "system": "PixelSpace",
            "layout_width": 1700,
            "layout_height": 2200,
        }
        metadata = resolve_metadata({
            "filetype": "application/pdf",
            "page_number": 2,
            "coordinates": coordinates,
            "emphasized_text_contents": ["Important", "note"],
            "emphasized_text_tags": ["b", "i"],
        })

        assert isinstance(metadata, KnownFormat)
        assert metadata.metadata.page_number == 2
        common = metadata.metadata.common
        assert common.coordinates == coordinates
        assert common.emphasized_text_contents == ["Important", "note"]
        assert common.emphasized_text_tags == ["b", "i"]

    def test_invalid_format_field_falls_back_to_common(self):
        metadata = resolve_metadata({
            "filetype": "application/pdf",
            "filename": "a.pdf",
            "page_number": "not a number",
        })
        assert isinstance(metadata, UnknownFormat)
        assert metadata.metadata.filename == "a.pdf"

    def test_invalid_common_field_is_an_error(self):
        with pytest.raises(ValidationError):
            resolve_metadata({"filetype": "application/pdf", "category_depth": "deep"})

    def test_non_object_is_an_error(self):
        with pytest.raises(ValueError):
            resolve_metadata(["application/pdf"])

    def test_lookup_file_format(self):
        assert lookup_file_format("text/html") is FileFormat.HTML
        assert lookup_file_format("sheet") is FileFormat.XLSX
        assert lookup_file_format("text/plain") is None
        assert lookup_file_format(None) is None


class TestKnownFormat:
    """Tests for the KnownFormat arm."""

    def test_rejects_mismatched_record(self):
        with pytest.raises(ValidationError):
            KnownFormat(format=FileFormat.EML, metadata=PagedDocument())

    def test_to_dict_is_flat(self):
        metadata = resolve_metadata({
            "filetype": "application/pdf",
            "filename": "a.pdf",
            "page_number": 3,
        })
        data = metadata.to_dict()
        assert data["filetype"] == "application/pdf"
        assert data["filename"] == "a.pdf"
        assert data["page_number"] == 3
        assert "common" not in data

    def test_to_dict_restores_filetype(self):
        metadata = KnownFormat(format=FileFormat.EPUB, metadata=EpubMetadata(section="One"))
        assert metadata.to_dict()["filetype"] == "application/epub+zip"


class TestIntoCommonMetadata:
    """Tests for projecting metadata onto its common fields."""

    @pytest.mark.parametrize("filetype,file_format,record", KNOWN_FORMATS)
    def test_keeps_common_fields_for_every_format(self, filetype, file_format, record):
        metadata = resolve_metadata({
            "filetype": filetype,
            "filename": "doc",
            "parent_id": "p1",
            "languages": ["eng"],
        })

        common = into_common_metadata(metadata)

        assert common == CommonMetadata(
            filetype=filetype, filename="doc", parent_id="p1", languages=["eng"]
        )
        assert metadata.into_common_metadata() == common

    def test_identity_for_unknown_format(self):
        common = CommonMetadata(filename="x.bin", filetype="application/octet-stream")
        metadata = UnknownFormat(metadata=common)
        assert into_common_metadata(metadata) == common

    def test_rejects_other_values(self):
        with pytest.raises(TypeError):
            into_common_metadata(CommonMetadata())


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------


class TestElement:
    """Tests for the Element model."""

    def test_null_metadata(self):
        element = Element.model_validate({
            "type": "NarrativeText",
            "element_id": "1",
            "text": "Hello, world!",
            "metadata": None,
        })
        assert element == Element(
            type=ElementType.NARRATIVE_TEXT,
            element_id="1",
            text="Hello, world!",
            metadata=None,
        )

    def test_missing_metadata(self):
        element = Element.model_validate({
            "type": "ListItem",
            "element_id": "3",
            "text": "A list element.",
        })
        assert element.metadata is None
        assert element.common_metadata is None

    def test_metadata_is_resolved(self):
        element = Element.model_validate({
            "type": "Image",
            "element_id": "2",
            "text": "b64data",
            "metadata": {"filetype": "application/pdf", "page_number": 3},
        })
        assert isinstance(element.metadata, KnownFormat)
        assert isinstance(element.metadata.metadata, PagedDocument)
        assert element.metadata.metadata.page_number == 3
        assert element.common_metadata.filetype == "application/pdf"

    def test_composite_element(self):
        element = Element.model_validate({
            "type": "CompositeElement",
            "element_id": "c1",
            "text": "chunk",
        })
        assert element.type is ElementType.COMPOSITE_ELEMENT

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError):
            Element.model_validate({"type": "Paragraph", "element_id": "1", "text": ""})

    @pytest.mark.parametrize("missing", ["type", "element_id", "text"])
    def test_required_fields(self, missing):
        data = {"type": "Title", "element_id": "1", "text": "Title"}
        del data[missing]
        with pytest.raises(ValidationError):
            Element.model_validate(data)

    def test_numeric_element_id_is_rejected(self):
        with pytest.raises(ValidationError):
            Element.model_validate({"type": "Title", "element_id": 1, "text": "T"})

    def test_to_dict(self):
        element = Element(type=ElementType.TITLE, element_id="1", text="Intro")
        assert element.to_dict() == {
            "type": "Title",
            "element_id": "1",
            "text": "Intro",
            "metadata": None,
        }

    def test_to_dict_round_trips(self):
        data = {
            "type": "Table",
            "element_id": "t1",
            "text": "a b",
            "metadata": {
                "filetype": "text/html",
                "text_as_html": "<table></table>",
                "link_urls": ["https://example.com"],
            },
        }
        element = Element.model_validate(data)
        assert Element.model_validate(element.to_dict()) == element

    @pytest.mark.parametrize(
        "metadata",
        [
            {"filetype": "application/pdf", "filename": "a.pdf", "page_number": 3},
            {"filetype": "sheet", "page_number": 1, "page_name": "Sheet1"},
            {"filetype": "application/msword", "header_footer_type": "primary"},
            {"filename": "notes.txt", "languages": ["eng"]},
        ],
    )
    @pytest.mark.parametrize("mode", ["python", "json"])
    def test_model_dump_round_trips(self, metadata, mode):
        element = Element.model_validate({
            "type": "Title",
            "element_id": "1",
            "text": "Intro",
            "metadata": metadata,
        })
        restored = Element.model_validate(element.model_dump(mode=mode))
        assert restored == element
