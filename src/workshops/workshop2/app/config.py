"""Configuration for the templates and forms workshop."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends
from pydantic_settings import SettingsConfigDict

from ...common.config import WorkshopSettings, env_files

PROJECT_DIR = Path(__file__).resolve().parents[1]


class Settings(WorkshopSettings):
    """Runtime configuration for workshop 2."""

    model_config = SettingsConfigDict(env_prefix="WORKSHOP2_", env_file=env_files(PROJECT_DIR))

    project_name: str = "Workshop 2: Templates & Forms"
    session_cookie_name: str = "workshop2_session"


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


SettingsDependency = Annotated[Settings, Depends(get_settings)]
