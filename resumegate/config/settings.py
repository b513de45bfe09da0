from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    classification_provider: str = "none"
    classification_api_key: str = ""
    classification_model_name: str = ""
    classification_base_url: str = ""
    classification_timeout_seconds: int = 30
    classification_temperature: float = 0.0
    classification_excerpt_chars: int = 3600

    classification_retry_max_attempts: int = 3
    classification_retry_base_delay_ms: int = 800
    classification_retry_max_delay_ms: int = 6000
    classification_retry_jitter_ms: int = 400

    short_word_document_word_limit: int = 150
