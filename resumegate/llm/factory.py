from typing import ClassVar

from resumegate.config.settings import Settings
from resumegate.llm.client_base import BaseGenerativeModel
from resumegate.llm.example_client_adapter import ExampleClientAdapter
from resumegate.llm.openai_client_adapter import OpenAIClientAdapter


class GenerativeModelFactory:
    """Creates the configured generative model adapter for document classification."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseGenerativeModel | None:
        """Create a model adapter, or None when the model stage is disabled."""
        provider = settings.classification_provider.strip().lower()
        if provider in ("", "none"):
            return None
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.classification_api_key,
            model=settings.classification_model_name,
            timeout_seconds=settings.classification_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            temperature=settings.classification_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.classification_base_url.strip()
            if not url:
                raise ValueError(
                    "classification_base_url is required for "
                    "classification_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.classification_base_url.strip() or default_base_url
        supported = [
            "none",
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown classification provider '{provider}'. Choose from: {supported}"
        )
