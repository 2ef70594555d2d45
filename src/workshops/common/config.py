"""Settings shared by every workshop application."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import model_validator, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__ as package_version

REPOSITORY_ROOT = Path(__file__).resolve().parents[3]

EnvironmentName = Literal["development", "test", "ci"]

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "test": "test",
    "testing": "test",
    "ci": "ci",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "reload": True,
        "db_echo": False,
    },
    "test": {
        "log_level": "WARNING",
        "reload": False,
        "db_echo": False,
    },
    "ci": {
        "log_level": "INFO",
        "reload": False,
        "db_echo": False,
    },
}


def env_files(project_dir: Path) -> tuple[Path, Path]:
    """Return the ``.env`` files consulted for a workshop, most specific first."""

    return project_dir / ".env", REPOSITORY_ROOT / ".env"


class WorkshopSettings(BaseSettings):
    """Runtime configuration common to all workshop servers.

    Each workshop subclasses this model with its own ``env_prefix`` so that
    ``WORKSHOP1_APP_PORT`` and ``WORKSHOP3_APP_PORT`` can differ.
    """

    model_config = SettingsConfigDict(
        env_file=(REPOSITORY_ROOT / ".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Workshop"
    environment: EnvironmentName = "development"
    version: str = package_version
    app_host: str = "0.0.0.0"
    app_port: int = 3000
    log_level: str = "INFO"
    reload: bool = True

    session_secret_key: str = "change-me-session"
    session_cookie_name: str = "session"
    session_max_age: int | None = 60 * 60 * 24 * 14
    session_https_only: bool = False
    session_same_site: str = "lax"

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        if isinstance(value, str):
            normalized = value.strip().lower()
        else:
            normalized = ""
        return _ENVIRONMENT_ALIASES.get(normalized or "development", "development")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str):
            return "INFO"
        return value.upper()

    @field_validator("session_same_site", mode="before")
    @classmethod
    def _normalize_same_site(cls, value: object) -> str:
        if not isinstance(value, str):
            return "lax"
        normalized = value.lower()
        if normalized not in {"lax", "strict", "none"}:
            return "lax"
        return normalized

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "WorkshopSettings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(self.model_fields_set)
        known_fields = type(self).model_fields
        for field_name, value in profile.items():
            if field_name in known_fields and field_name not in fields_set:
                setattr(self, field_name, value)
        return self


__all__ = ["EnvironmentName", "REPOSITORY_ROOT", "WorkshopSettings", "env_files"]
