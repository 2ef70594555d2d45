"""Configuration for the persistence and realtime workshop."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends
from pydantic import field_validator
from pydantic_settings import SettingsConfigDict

from ...common.config import WorkshopSettings, env_files

PROJECT_DIR = Path(__file__).resolve().parents[1]


class Settings(WorkshopSettings):
    """Runtime configuration for workshop 4."""

    model_config = SettingsConfigDict(env_prefix="WORKSHOP4_", env_file=env_files(PROJECT_DIR))

    project_name: str = "Workshop 4: Persistence & Realtime"
    database_url: str = "sqlite+aiosqlite:///./database.db"
    db_echo: bool = False
    db_create_all: bool = True

    session_cookie_name: str = "workshop4_session"
    session_max_age: int | None = 15 * 60

    websocket_max_connections: int = 100
    chat_history_limit: int = 50
    react_cdn_url: str = "https://unpkg.com"

    @field_validator("websocket_max_connections", "chat_history_limit", mode="before")
    @classmethod
    def _ensure_positive(cls, value: object) -> int:
        try:
            parsed = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 1
        return max(parsed, 1)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


SettingsDependency = Annotated[Settings, Depends(get_settings)]
