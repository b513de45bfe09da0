class GenerationError(Exception):
    """Raised when a generative model call fails."""


class ModelNetworkError(GenerationError):
    """Raised when the model provider call fails due to network/infrastructure issues.

    ``status`` and ``code`` carry the provider's HTTP status and error code
    when known, so retry policies can classify the failure.
    """

    def __init__(self, message: str, *, status: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.code = code


class ModelResponseError(GenerationError):
    """Raised when the provider answers without usable content."""
