from dataclasses import dataclass

from resumegate.extraction.exceptions import ExtractionError


@dataclass(frozen=True)
class RawDocument:
    """An uploaded file as handed over by the upload collaborator."""

    buffer: bytes | None
    filename: str = ""
    mime_type: str = ""


@dataclass(frozen=True)
class ExtractionOk:
    text: str


@dataclass(frozen=True)
class ExtractionErr:
    error: ExtractionError


Extraction = ExtractionOk | ExtractionErr
