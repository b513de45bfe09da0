from abc import ABC, abstractmethod


class BaseFormatExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text; never blank.

        Raises:
            ExtractionError: with the adapter's format kind if parsing fails
                or yields only whitespace.
        """
