import io
from types import ModuleType

from resumegate.extraction.base import BaseFormatExtractor
from resumegate.extraction.exceptions import (
    ExtractionError,
    ExtractionKind,
    ExtractionReason,
)


def _load_python_docx() -> ModuleType:
    try:
        import docx
    except ImportError as exc:
        raise ExtractionError(
            ExtractionKind.DOCX, ExtractionReason.DEPENDENCY_MISSING, exc
        ) from exc
    return docx


class DocxAdapter(BaseFormatExtractor):
    """Extracts raw text from DOCX (Office Open XML) documents with python-docx.

    Body paragraphs come first, followed by table cells row by row. The
    library is imported on first use; when it cannot be loaded the upload
    fails with reason ``dependency_missing``.
    """

    def extract(self, data: bytes) -> str:
        docx = _load_python_docx()
        try:
            document = docx.Document(io.BytesIO(data))
            parts = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        parts.append(" ".join(cells))
        except Exception as exc:
            raise ExtractionError(
                ExtractionKind.DOCX, ExtractionReason.PARSE_FAILED, exc
            ) from exc
        text = "\n".join(parts)
        if not text.strip():
            raise ExtractionError(ExtractionKind.DOCX, ExtractionReason.EMPTY_TEXT)
        return text
