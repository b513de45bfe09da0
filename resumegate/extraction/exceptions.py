from enum import Enum


class ExtractionKind(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    DEFAULT = "default"


class ExtractionReason(str, Enum):
    EMPTY_TEXT = "empty_text"
    PARSE_FAILED = "parse_failed"
    DEPENDENCY_MISSING = "dependency_missing"
    MISSING_DOCUMENT = "missing_document"
    UNSUPPORTED_FORMAT = "unsupported_format"


_MESSAGES: dict[ExtractionKind, tuple[str, str]] = {
    ExtractionKind.PDF: (
        "We couldn't read your PDF resume.",
        "Please export a new PDF (make sure it is not password protected) "
        "and upload it again.",
    ),
    ExtractionKind.DOCX: (
        "We couldn't read your DOCX resume.",
        "Please download a fresh DOCX copy (or export it to PDF) from your "
        "editor and try again.",
    ),
    ExtractionKind.DOC: (
        "We couldn't read your DOC resume.",
        "Please re-save it as a DOC file or export it to PDF before uploading again.",
    ),
    ExtractionKind.DEFAULT: (
        "We couldn't read your resume.",
        "Please upload a valid PDF or DOCX resume and try again.",
    ),
}


def user_message_for(kind: ExtractionKind) -> str:
    intro, guidance = _MESSAGES.get(kind, _MESSAGES[ExtractionKind.DEFAULT])
    return f"{intro} {guidance}"


class ExtractionError(Exception):
    """Raised when a document cannot be turned into text.

    The exception message is the user-facing two-sentence message for
    ``kind``; ``reason`` and ``cause`` are kept for diagnostics.
    """

    def __init__(
        self,
        kind: ExtractionKind,
        reason: ExtractionReason,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        self.kind = kind
        self.reason = reason
        self.cause = cause
        self.user_message = message or user_message_for(kind)
        super().__init__(self.user_message)
        if cause is not None:
            self.__cause__ = cause


class UnsupportedFormatError(ExtractionError):
    """Raised for uploads that are neither PDF, DOCX nor DOC."""

    def __init__(self, filename: str = "", mime_type: str = "") -> None:
        self.filename = filename
        self.mime_type = mime_type
        super().__init__(
            ExtractionKind.DEFAULT,
            ExtractionReason.UNSUPPORTED_FORMAT,
            message=(
                "Unsupported resume format encountered. "
                "Only PDF, DOC, or DOCX files are processed."
            ),
        )
