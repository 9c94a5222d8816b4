"""Configuration for the route catalog service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _default_openapi_path() -> Path:
    return Path.cwd() / "public" / "openapi.yaml"


class Settings(BaseSettings):
    """Environment settings for the route catalog."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    openapi_path: Path = Field(
        default_factory=_default_openapi_path,
        description="OpenAPI document served by the catalog endpoint.",
    )
    host: str = Field("0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(3000, ge=1, le=65535, description="Port the HTTP server listens on.")
    log_level: LogLevel = Field("INFO", description="Root logging level.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
