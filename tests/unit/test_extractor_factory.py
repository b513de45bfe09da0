from unittest.mock import patch

import pytest

from resumegate.extraction.doc_adapter import LegacyDocAdapter
from resumegate.extraction.docx_adapter import DocxAdapter
from resumegate.extraction.factory import FormatExtractorFactory
from resumegate.extraction.pdfplumber_adapter import PdfPlumberAdapter
from resumegate.extraction.pymupdf_adapter import PyMuPdfAdapter


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("resumegate.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


class TestCreatePdfExtractor:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = FormatExtractorFactory.create_pdf_extractor(_make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = FormatExtractorFactory.create_pdf_extractor(_make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_and_whitespace_insensitive(self) -> None:
        adapter = FormatExtractorFactory.create_pdf_extractor(_make_settings(" PdfPlumber "))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            FormatExtractorFactory.create_pdf_extractor(_make_settings("unknown"))


class TestCreate:
    def test_covers_every_supported_extension(self) -> None:
        extractors = FormatExtractorFactory.create(_make_settings("pymupdf"))
        assert set(extractors) == {".pdf", ".docx", ".doc"}
        assert isinstance(extractors[".pdf"], PyMuPdfAdapter)
        assert isinstance(extractors[".docx"], DocxAdapter)
        assert isinstance(extractors[".doc"], LegacyDocAdapter)

    def test_unknown_engine_fails_fast(self) -> None:
        with pytest.raises(ValueError):
            FormatExtractorFactory.create(_make_settings("pdfminer"))
