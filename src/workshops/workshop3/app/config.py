"""Configuration for the sessions and wiki workshop."""

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
    """Runtime configuration for workshop 3."""

    model_config = SettingsConfigDict(env_prefix="WORKSHOP3_", env_file=env_files(PROJECT_DIR))

    project_name: str = "Workshop 3: Sessions & Wiki"
    session_cookie_name: str = "workshop3_session"
    upload_dir: Path = Path("uploads") / "avatars"
    max_upload_bytes: int = 5 * 1024 * 1024
    quill_cdn_url: str = "https://cdn.jsdelivr.net/npm/quill@2.0.3/dist"

    @field_validator("max_upload_bytes", mode="before")
    @classmethod
    def _ensure_positive_upload_limit(cls, value: object) -> int:
        try:
            parsed = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 5 * 1024 * 1024
        return max(parsed, 1)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


SettingsDependency = Annotated[Settings, Depends(get_settings)]
