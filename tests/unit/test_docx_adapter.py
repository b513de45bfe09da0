import sys

import pytest

from resumegate.extraction.docx_adapter import DocxAdapter
from resumegate.extraction.exceptions import ExtractionError, ExtractionKind, ExtractionReason


class TestDocxAdapter:
    def test_extracts_paragraphs(self, sample_docx_bytes: bytes) -> None:
        result = DocxAdapter().extract(sample_docx_bytes)
        assert "Hello DOCX World" in result
        assert "Second paragraph" in result

    def test_extracts_table_cells_after_paragraphs(self, sample_docx_bytes: bytes) -> None:
        result = DocxAdapter().extract(sample_docx_bytes)
        assert "Cell A Cell B" in result
        assert result.index("Second paragraph") < result.index("Cell A")

    def test_empty_document_raises_empty_text(self, empty_docx_bytes: bytes) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            DocxAdapter().extract(empty_docx_bytes)
        assert exc_info.value.kind is ExtractionKind.DOCX
        assert exc_info.value.reason is ExtractionReason.EMPTY_TEXT

    def test_corrupt_bytes_raise_parse_failed(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            DocxAdapter().extract(b"PK\x03\x04 definitely not a docx")
        assert exc_info.value.kind is ExtractionKind.DOCX
        assert exc_info.value.reason is ExtractionReason.PARSE_FAILED

    def test_missing_library_raises_dependency_missing(
        self, sample_docx_bytes: bytes, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setitem(sys.modules, "docx", None)
        with pytest.raises(ExtractionError) as exc_info:
            DocxAdapter().extract(sample_docx_bytes)
        assert exc_info.value.kind is ExtractionKind.DOCX
        assert exc_info.value.reason is ExtractionReason.DEPENDENCY_MISSING
        assert isinstance(exc_info.value.cause, ImportError)
