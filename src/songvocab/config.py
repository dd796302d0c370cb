"""Configuration management using Pydantic Settings."""

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SONGVOCAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_api_key: SecretStr = SecretStr("")
    openai_base_url: str = "https://api.openai.com/v1"
    extraction_model: str = "gpt-4o-mini"
    detection_model: str = "gpt-4o-mini"
    translation_model: str = "gpt-4o"  # stronger model for flashcard quality
    request_timeout: float = 60.0
    max_retries: int = 3
    retry_delay: float = 1.0
    max_lyrics_length: int = 15_000
    default_level: str = "B1"
    translation_batch_size: int = 25
    translation_max_workers: int = 4

    @field_validator("max_retries", "max_lyrics_length", "translation_batch_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts and limits are at least 1."""
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @field_validator("translation_max_workers")
    @classmethod
    def validate_translation_max_workers(cls, v: int) -> int:
        """Validate the translation pool has at least one worker."""
        if v < 1:
            raise ValueError("translation_max_workers must be at least 1")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("default_level")
    @classmethod
    def validate_default_level(cls, v: str) -> str:
        """Validate default level is a known CEFR level."""
        level = v.strip().upper()
        if level not in {"A1", "A2", "B1", "B2", "C1", "C2"}:
            raise ValueError(f"default_level must be one of A1..C2, got {v!r}")
        return level

    def is_configured(self) -> bool:
        """Check if an LLM API key is set."""
        return bool(self.openai_api_key.get_secret_value())

    def get_api_key(self) -> str:
        """Get the actual key value for API use."""
        return self.openai_api_key.get_secret_value()


settings = Settings()
