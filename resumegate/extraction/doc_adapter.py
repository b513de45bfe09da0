import tempfile
import uuid
from collections.abc import Callable
from pathlib import Path

from resumegate.extraction.base import BaseFormatExtractor
from resumegate.extraction.exceptions import (
    ExtractionError,
    ExtractionKind,
    ExtractionReason,
)
from resumegate.extraction.word97 import LegacyWordDocument, Word97Reader


class LegacyDocAdapter(BaseFormatExtractor):
    """Extracts text from legacy Word (.doc) uploads.

    The reader works on files, so the bytes are written to a scratch
    directory that is removed on every exit path. The reader itself is
    created on first use and reused by this adapter afterwards.
    """

    def __init__(self, reader_factory: Callable[[], Word97Reader] = Word97Reader) -> None:
        self._reader_factory = reader_factory
        self._reader: Word97Reader | None = None

    @property
    def reader(self) -> Word97Reader:
        if self._reader is None:
            self._reader = self._reader_factory()
        return self._reader

    def extract(self, data: bytes) -> str:
        try:
            with tempfile.TemporaryDirectory(
                prefix="resumegate-", ignore_cleanup_errors=True
            ) as tmp_dir:
                path = Path(tmp_dir) / f"resume-{uuid.uuid4().hex}.doc"
                path.write_bytes(data)
                document = self.reader.read(path)
        except Exception as exc:
            raise ExtractionError(
                ExtractionKind.DOC, ExtractionReason.PARSE_FAILED, exc
            ) from exc

        if document is None:
            raise ExtractionError(ExtractionKind.DOC, ExtractionReason.MISSING_DOCUMENT)
        combined = combine_sections(document)
        if not combined.strip():
            raise ExtractionError(ExtractionKind.DOC, ExtractionReason.EMPTY_TEXT)
        return combined


def combine_sections(document: LegacyWordDocument) -> str:
    """Join body, headers, footers and fallback text with blank lines."""
    sections = [
        document.body,
        "\n".join(document.headers),
        "\n".join(document.footers),
        document.text,
    ]
    return "\n\n".join(section for section in sections if section)
