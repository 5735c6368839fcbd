from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Keys at or below this length are treated as placeholders, not credentials.
MIN_API_KEY_LENGTH = 20


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Gemini Chat Relay", alias="APP_NAME")
    service_name: str = Field(default="Gemini Chat API", alias="SERVICE_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model: str = Field(default="gemini-2.0-flash", alias="GEMINI_MODEL")
    gemini_timeout_ms: int | None = Field(default=None, alias="GEMINI_TIMEOUT_MS")

    @property
    def gemini_enabled(self) -> bool:
        key = self.gemini_api_key
        return bool(key) and len(key) > MIN_API_KEY_LENGTH


@lru_cache
def get_settings() -> Settings:
    return Settings()
