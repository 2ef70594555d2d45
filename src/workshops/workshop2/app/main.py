"""Entry point for the templates and forms workshop."""

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
from .rendering import render_form_errors
from .store import QuoteStore
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
        summary="Server-rendered pages, forms and CSRF-protected quotes.",
    )
    application.state.settings = settings
    application.state.templates = build_templates(TEMPLATES_DIR)
    application.state.quotes = QuoteStore()

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age,
        https_only=settings.session_https_only,
        same_site=settings.session_same_site,
    )

    application.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    application.include_router(views_router)
    application.include_router(health_router)
    register_exception_handlers(application, validation_renderer=render_form_errors)
    return application


app = create_app()


def run() -> None:
    """Convenience entry point for ``workshop2-app``."""

    settings = get_settings()
    uvicorn.run(
        "workshops.workshop2.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
