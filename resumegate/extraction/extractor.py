from pathlib import PurePath

from resumegate.config.settings import Settings
from resumegate.extraction.base import BaseFormatExtractor
from resumegate.extraction.doc_adapter import LegacyDocAdapter
from resumegate.extraction.docx_adapter import DocxAdapter
from resumegate.extraction.exceptions import (
    ExtractionError,
    ExtractionKind,
    ExtractionReason,
    UnsupportedFormatError,
)
from resumegate.extraction.factory import FormatExtractorFactory
from resumegate.extraction.models import (
    Extraction,
    ExtractionErr,
    ExtractionOk,
    RawDocument,
)
from resumegate.extraction.normalize import normalize_extracted_text
from resumegate.logging.logger import Log


def resolve_extension(filename: str, mime_type: str) -> str:
    """Prefer the file extension, falling back to MIME type sniffing."""
    extension = PurePath(filename or "").suffix.lower()
    if extension:
        return extension
    mime = (mime_type or "").lower()
    if "pdf" in mime:
        return ".pdf"
    if "wordprocessingml" in mime:
        return ".docx"
    if "msword" in mime:
        return ".doc"
    return ""


class TextExtractor:
    """Turns uploaded documents into normalized plain text."""

    def __init__(
        self,
        pdf_extractor: BaseFormatExtractor,
        docx_extractor: BaseFormatExtractor | None = None,
        doc_extractor: BaseFormatExtractor | None = None,
    ) -> None:
        self._extractors: dict[str, BaseFormatExtractor] = {
            ".pdf": pdf_extractor,
            ".docx": docx_extractor or DocxAdapter(),
            ".doc": doc_extractor or LegacyDocAdapter(),
        }

    def extract(self, document: RawDocument) -> str:
        """Extract normalized text from ``document``.

        Raises:
            ExtractionError: with kind pdf/docx/doc when the recognized format
                cannot be read, or kind default for missing buffers and
                unsupported formats.
        """
        if document.buffer is None:
            raise ExtractionError(ExtractionKind.DEFAULT, ExtractionReason.MISSING_DOCUMENT)
        extension = resolve_extension(document.filename, document.mime_type)
        extractor = self._extractors.get(extension)
        if extractor is None:
            raise UnsupportedFormatError(document.filename, document.mime_type)
        try:
            text = extractor.extract(document.buffer)
        except ExtractionError as exc:
            Log.warning(
                "resume_extraction_failed",
                kind=exc.kind.value,
                reason=exc.reason.value,
                cause=repr(exc.cause) if exc.cause else None,
            )
            raise
        return normalize_extracted_text(text)

    def try_extract(self, document: RawDocument) -> Extraction:
        """Like ``extract`` but returns a tagged result instead of raising."""
        try:
            return ExtractionOk(self.extract(document))
        except ExtractionError as exc:
            return ExtractionErr(exc)


def build_text_extractor(settings: Settings) -> TextExtractor:
    extractors = FormatExtractorFactory.create(settings)
    return TextExtractor(
        pdf_extractor=extractors[".pdf"],
        docx_extractor=extractors[".docx"],
        doc_extractor=extractors[".doc"],
    )
