import pymupdf

from resumegate.extraction.base import BaseFormatExtractor
from resumegate.extraction.exceptions import (
    ExtractionError,
    ExtractionKind,
    ExtractionReason,
)


class PyMuPdfAdapter(BaseFormatExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionError(
                ExtractionKind.PDF, ExtractionReason.PARSE_FAILED, exc
            ) from exc
        text = "\n".join(pages).strip()
        if not text:
            raise ExtractionError(ExtractionKind.PDF, ExtractionReason.EMPTY_TEXT)
        return text
