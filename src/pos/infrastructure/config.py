"""Application settings loaded from the environment (prefix ``POS_``)."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):

    database_url: str = Field(default="sqlite:///pos.db", description="SQLAlchemy database URL")
    database_echo: bool = Field(default=False, description="Echo SQL statements (debug)")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON instead of console text")

    model_config = SettingsConfigDict(
        env_prefix="POS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def is_in_memory_database(self) -> bool:
        return self.database_url in ("sqlite://", "sqlite:///:memory:")


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
