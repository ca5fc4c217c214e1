"""Relay configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)


class RelaySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MCP_TIME_RELAY_", env_file=str(ENV_FILE), extra="ignore")

    time_url: str = "https://mcp-time-server-online-production.up.railway.app/time"
    request_timeout_s: float = 10.0
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> RelaySettings:
    return RelaySettings()
