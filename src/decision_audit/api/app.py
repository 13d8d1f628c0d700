"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from decision_audit.api.middleware.error_handler import register_error_handlers
from decision_audit.api.routes import analyze, health
from decision_audit.core.config import APIConfig, AppSettings
from decision_audit.core.logging_config import setup_logging
from decision_audit.core.startup_checks import validate_settings


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("decision-audit")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Build the API; *settings* defaults to the environment."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        resolved = settings or AppSettings()
        validate_settings(resolved)
        setup_logging(resolved.observability)
        app.state.settings = resolved
        yield

    api_config = settings.api if settings is not None else APIConfig()
    application = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(application)
    application.include_router(health.router)
    application.include_router(analyze.router, prefix="/api")
    return application


app = create_app()
