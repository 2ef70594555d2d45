"""Configuration for the routing workshop."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends
from pydantic_settings import SettingsConfigDict

from ...common.config import WorkshopSettings, env_files

PROJECT_DIR = Path(__file__).resolve().parents[1]


class Settings(WorkshopSettings):
    """Runtime configuration for workshop 1."""

    model_config = SettingsConfigDict(env_prefix="WORKSHOP1_", env_file=env_files(PROJECT_DIR))

    project_name: str = "Workshop 1: Routing"
    default_currency: str = "USD"


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


SettingsDependency = Annotated[Settings, Depends(get_settings)]
