"""MeetSynth configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./meetsynth.db"

    # Generation service (any OpenAI-compatible endpoint)
    openai_api_key: str = ""
    openai_base_url: str | None = None
    generation_model: str = "llama3-8b-8192"
    generation_temperature: float = 0.3
    generation_max_tokens: int = 2048

    # Input bounding
    max_input_chars: int = 8000

    # SMTP mail transport
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587  # 587 for STARTTLS
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True
    smtp_timeout_seconds: int = 30
    email_from: str = ""

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def sender_address(self) -> str:
        """Get the From address, falling back to the SMTP username."""
        return self.email_from or self.smtp_username


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
