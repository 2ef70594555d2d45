"""Entry point for the routing workshop."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from ...common.errors import register_exception_handlers
from ...common.health import router as health_router
from ...common.logging import configure_logging
from ...common.middleware import CorrelationIdMiddleware
from .config import get_settings
from .routers import router


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings)

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Hello-world routes, path parameters and query strings.",
    )
    application.state.settings = settings
    application.add_middleware(CorrelationIdMiddleware)

    application.include_router(router)
    application.include_router(health_router)
    register_exception_handlers(application)
    return application


app = create_app()


def run() -> None:
    """Convenience entry point for ``workshop1-app``."""

    settings = get_settings()
    uvicorn.run(
        "workshops.workshop1.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
