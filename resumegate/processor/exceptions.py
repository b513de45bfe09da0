from resumegate.classification.models import ClassificationResult
from resumegate.classification.policy import rejection_message


class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentRejectedError(ProcessorError):
    """Raised when the uploaded document is classified as something other than a CV."""

    def __init__(self, classification: ClassificationResult) -> None:
        self.classification = classification
        self.description = classification.description
        self.reason = classification.reason
        super().__init__(rejection_message(classification))
