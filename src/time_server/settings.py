"""Time server configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schemas import DEFAULT_TIMEZONE

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)


class TimeServerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MCP_TIME_", env_file=str(ENV_FILE), extra="ignore")

    host: str = "0.0.0.0"
    # Hosting platforms inject a bare PORT.
    port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "MCP_TIME_PORT"))
    http_mode: bool = False

    # Defaults applied at the transport boundary when a caller omits them.
    default_timezone: str = DEFAULT_TIMEZONE
    default_format: str = "locale"
    locale: str = "es_AR"
    # False stamps non-UTC wall-clock iso output with Z (legacy output).
    iso_offset_aware: bool = False

    cors_allow_origins: list[str] = ["*"]
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> TimeServerSettings:
    return TimeServerSettings()
