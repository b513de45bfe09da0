from resumegate.extraction.exceptions import (
    ExtractionError,
    ExtractionKind,
    ExtractionReason,
    user_message_for,
)


class TestExtractionError:
    def test_message_has_intro_and_guidance(self) -> None:
        message = user_message_for(ExtractionKind.DOC)
        assert message.startswith("We couldn't read your DOC resume.")
        assert "re-save" in message

    def test_default_message_is_generic(self) -> None:
        assert "valid PDF or DOCX" in user_message_for(ExtractionKind.DEFAULT)

    def test_keeps_cause(self) -> None:
        cause = ValueError("broken xref")
        error = ExtractionError(ExtractionKind.PDF, ExtractionReason.PARSE_FAILED, cause)
        assert error.cause is cause
        assert error.__cause__ is cause
        assert str(error) == error.user_message
