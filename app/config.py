# app/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings.
    Values come from environment variables or the .env file.
    """

    # ---------- OpenAI ----------
    # OPENAI_API_KEY=sk-xxxx... in .env
    # A missing key disables the form for the whole session.
    openai_api_key: str | None = None

    # OPENAI_MODEL=gpt-4.1 in .env overrides the model
    openai_model: str = "gpt-4.1-mini"
    openai_temperature: float = 0.4
    # seconds
    openai_timeout: float = 60.0

    # ---------- Logging ----------
    log_level: str = "INFO"

    # ---------- Pydantic Settings ----------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # unknown env vars are not an error
    )


@lru_cache
def get_settings() -> Settings:
    """Settings singleton."""
    return Settings()


# other modules use `from app.config import settings`
settings = get_settings()
