"""Configuration management for MediAssist."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM Configuration
    default_model: str = Field(
        default="gemini/gemini-2.5-flash",
        alias="MEDIASSIST_MODEL",
    )

    # API Keys (LiteLLM reads GEMINI_API_KEY for Google AI Studio)
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    google_api_key: Optional[str] = Field(default=None, alias="GOOGLE_API_KEY")

    # Request settings
    llm_temperature: float = Field(
        default=0.3,
        alias="MEDIASSIST_TEMPERATURE",
    )
    max_tokens: int = Field(
        default=2048,
        alias="MEDIASSIST_MAX_TOKENS",
    )
    max_retries: int = Field(
        default=3,
        alias="MEDIASSIST_MAX_RETRIES",
    )

    @property
    def api_key(self) -> Optional[str]:
        """The Gemini key, falling back to GOOGLE_API_KEY."""
        return self.gemini_api_key or self.google_api_key


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
