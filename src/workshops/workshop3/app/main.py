"""Entry point for the sessions and wiki workshop."""

from __future__ import annotations

from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from ...common.errors import register_exception_handlers
from ...common.health import router as health_router
from ...common.logging import configure_logging
from ...common.middleware import CorrelationIdMiddleware
from ...common.templates import build_templates
from .config import get_settings
from .rendering import render_form_errors, render_not_found
from .store import DataStore
from .views import router as views_router

APP_DIR = Path(__file__).resolve().parent
STATIC_DIR = APP_DIR / "static"
TEMPLATES_DIR = APP_DIR / "templates"


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings)

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Session auth, a Markdown/Quill wiki and avatar uploads.",
    )
    application.state.settings = settings
    application.state.templates = build_templates(TEMPLATES_DIR)
    application.state.data_store = DataStore()

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age,
        https_only=settings.session_https_only,
        same_site=settings.session_same_site,
    )

    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    application.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    application.mount("/avatars", StaticFiles(directory=settings.upload_dir), name="avatars")

    application.include_router(views_router)
    application.include_router(health_router)
    register_exception_handlers(
        application,
        validation_renderer=render_form_errors,
        not_found_renderer=render_not_found,
    )
    return application


app = create_app()


def run() -> None:
    """Convenience entry point for ``workshop3-app``."""

    settings = get_settings()
    uvicorn.run(
        "workshops.workshop3.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
