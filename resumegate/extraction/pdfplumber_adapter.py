import io

import pdfplumber

from resumegate.extraction.base import BaseFormatExtractor
from resumegate.extraction.exceptions import (
    ExtractionError,
    ExtractionKind,
    ExtractionReason,
)


class PdfPlumberAdapter(BaseFormatExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(
                ExtractionKind.PDF, ExtractionReason.PARSE_FAILED, exc
            ) from exc
        text = "\n".join(pages).strip()
        if not text:
            raise ExtractionError(ExtractionKind.PDF, ExtractionReason.EMPTY_TEXT)
        return text
