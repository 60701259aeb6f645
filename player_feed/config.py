"""
Configuration settings for Player Feed.

Uses Pydantic Settings for the ambient knobs (environment name, logging).
The spreadsheet source, the player endpoint and the audit log location are
fixed module constants: the feed always reads the same sheet and posts to
the same local server.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SOURCE_PATH = "ipl-sheet.xlsx"
PLAYER_ENDPOINT = "http://localhost:8080/api/player"
AUDIT_LOG_PATH = "players.json"
MAX_PLAYERS = 10


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = [
    "AUDIT_LOG_PATH",
    "MAX_PLAYERS",
    "PLAYER_ENDPOINT",
    "SOURCE_PATH",
    "Settings",
    "get_settings",
]
