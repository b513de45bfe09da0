from abc import ABC, abstractmethod


class BaseGenerativeModel(ABC):
    """Contract for provider-specific generative model adapters."""

    @abstractmethod
    def generate_content(self, prompt: str) -> str:
        """Return the model's answer to ``prompt`` as plain text.

        Raises:
            GenerationError: on any provider failure.
        """
