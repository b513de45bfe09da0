from pathlib import Path
from unittest.mock import MagicMock

import pytest

from resumegate.extraction.doc_adapter import LegacyDocAdapter, combine_sections
from resumegate.extraction.exceptions import ExtractionError, ExtractionKind, ExtractionReason
from resumegate.extraction.word97 import LegacyWordDocument, Word97Reader


def _adapter_with(reader: MagicMock) -> LegacyDocAdapter:
    return LegacyDocAdapter(reader_factory=lambda: reader)


class TestCombineSections:
    def test_joins_non_empty_sections_with_blank_lines(self) -> None:
        document = LegacyWordDocument(
            body="Body text",
            headers=["Header one", "Header two"],
            footers=[],
            text="Fallback",
        )
        assert combine_sections(document) == "Body text\n\nHeader one\nHeader two\n\nFallback"

    def test_empty_document(self) -> None:
        assert combine_sections(LegacyWordDocument()) == ""


class TestLegacyDocAdapter:
    def test_returns_combined_text(self) -> None:
        reader = MagicMock(spec=Word97Reader)
        reader.read.return_value = LegacyWordDocument(body="Experience", footers=["Page 1"])
        assert _adapter_with(reader).extract(b"doc-bytes") == "Experience\n\nPage 1"

    def test_reader_sees_the_uploaded_bytes(self) -> None:
        seen: dict[str, bytes] = {}

        def _read(path: Path) -> LegacyWordDocument:
            seen["data"] = path.read_bytes()
            seen["suffix"] = path.suffix.encode()
            return LegacyWordDocument(body="text")

        reader = MagicMock(spec=Word97Reader)
        reader.read.side_effect = _read
        _adapter_with(reader).extract(b"raw doc")
        assert seen == {"data": b"raw doc", "suffix": b".doc"}

    def test_scratch_file_removed_after_success(self) -> None:
        reader = MagicMock(spec=Word97Reader)
        reader.read.return_value = LegacyWordDocument(body="text")
        _adapter_with(reader).extract(b"raw doc")
        path = reader.read.call_args.args[0]
        assert not path.exists()
        assert not path.parent.exists()

    def test_scratch_file_removed_after_failure(self) -> None:
        reader = MagicMock(spec=Word97Reader)
        reader.read.side_effect = RuntimeError("corrupt")
        with pytest.raises(ExtractionError) as exc_info:
            _adapter_with(reader).extract(b"raw doc")
        assert exc_info.value.kind is ExtractionKind.DOC
        assert exc_info.value.reason is ExtractionReason.PARSE_FAILED
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert not reader.read.call_args.args[0].exists()

    def test_blank_text_raises_empty_text(self) -> None:
        reader = MagicMock(spec=Word97Reader)
        reader.read.return_value = LegacyWordDocument(body="  \n ")
        with pytest.raises(ExtractionError) as exc_info:
            _adapter_with(reader).extract(b"raw doc")
        assert exc_info.value.reason is ExtractionReason.EMPTY_TEXT

    def test_missing_word_stream_raises_missing_document(self) -> None:
        reader = MagicMock(spec=Word97Reader)
        reader.read.return_value = None
        with pytest.raises(ExtractionError) as exc_info:
            _adapter_with(reader).extract(b"raw doc")
        assert exc_info.value.reason is ExtractionReason.MISSING_DOCUMENT

    def test_reader_created_once(self) -> None:
        factory = MagicMock(return_value=MagicMock(spec=Word97Reader))
        factory.return_value.read.return_value = LegacyWordDocument(body="text")
        adapter = LegacyDocAdapter(reader_factory=factory)
        adapter.extract(b"one")
        adapter.extract(b"two")
        factory.assert_called_once()

    def test_non_ole_bytes_raise_parse_failed(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            LegacyDocAdapter().extract(b"plain text pretending to be a doc")
        assert exc_info.value.kind is ExtractionKind.DOC
        assert exc_info.value.reason is ExtractionReason.PARSE_FAILED
