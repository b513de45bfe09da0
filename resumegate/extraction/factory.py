from resumegate.config.settings import Settings
from resumegate.extraction.base import BaseFormatExtractor
from resumegate.extraction.doc_adapter import LegacyDocAdapter
from resumegate.extraction.docx_adapter import DocxAdapter
from resumegate.extraction.pdfplumber_adapter import PdfPlumberAdapter
from resumegate.extraction.pymupdf_adapter import PyMuPdfAdapter


class FormatExtractorFactory:
    """Builds the per-extension extractor table from settings.

    Only PDF has a choice of engine; Word formats always use their
    dedicated adapters.
    """

    PDF_ENGINES: dict[str, type[BaseFormatExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseFormatExtractor:
        engine = (settings.pdf_engine or "").strip().lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.PDF_ENGINES)}"
            )
        return adapter_cls()

    @classmethod
    def create(cls, settings: Settings) -> dict[str, BaseFormatExtractor]:
        return {
            ".pdf": cls.create_pdf_extractor(settings),
            ".docx": DocxAdapter(),
            ".doc": LegacyDocAdapter(),
        }
