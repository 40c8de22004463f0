from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_prefix: str = "/api"
    allowed_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ]
    )
    database_url: str = "sqlite+aiosqlite:///./modforge.db"
    database_echo: bool = False
    log_level: str = "INFO"
    claude_model: str | None = Field(
        default=None,
        description="Model override for code generation; SDK default when unset",
    )
    claude_max_turns: int = 1
    notification_history_limit: int = 200
    default_minecraft_version: str = "1.20.1"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
