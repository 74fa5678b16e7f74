"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

PLACEHOLDER_API_KEY = "dummy-key"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    openai_vision_max_output_tokens: int = 500
    openai_recipe_temperature: float = 0.8
    openai_recipe_max_output_tokens: int = 3000
    pantry_backend: str = "file"
    pantry_namespace: str = "pantry-storage"
    pantry_file_path: str = ".pantry.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def is_api_key_configured(raw: str | None) -> bool:
    """Return True when the model credential is present and not a placeholder."""
    if raw is None:
        return False
    cleaned = raw.strip()
    return cleaned not in {"", PLACEHOLDER_API_KEY}
