"""Entry point for the database, JSON API and realtime chat workshop."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
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
from . import realtime
from .api import api_router
from .config import get_settings
from .db import build_engine, build_session_maker, init_db
from .rendering import render_form_errors, render_not_found
from .views import router as views_router

APP_DIR = Path(__file__).resolve().parent
STATIC_DIR = APP_DIR / "static"
TEMPLATES_DIR = APP_DIR / "templates"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    settings = application.state.settings
    engine = application.state.engine
    if settings.db_create_all:
        await init_db(engine)
        logger.info("Database schema ensured", extra={"database_url": settings.database_url})
    try:
        yield
    finally:
        await realtime.broker.reset()
        await engine.dispose()


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings)

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="SQL persistence, a task API and a websocket chat room.",
        lifespan=lifespan,
    )
    engine = build_engine(settings)
    application.state.settings = settings
    application.state.engine = engine
    application.state.session_maker = build_session_maker(engine)
    application.state.templates = build_templates(TEMPLATES_DIR)

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
    application.include_router(api_router)
    application.include_router(realtime.router)
    application.include_router(health_router)
    register_exception_handlers(
        application,
        validation_renderer=render_form_errors,
        not_found_renderer=render_not_found,
    )
    return application


app = create_app()


def run() -> None:
    """Convenience entry point for ``workshop4-app``."""

    settings = get_settings()
    uvicorn.run(
        "workshops.workshop4.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
