"""FastAPI application factory.

``create_app()`` with no arguments reads the environment and builds a
fresh in-memory Container; tests pass their own.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coffeeshop.infrastructure.bootstrap import Container, build_container
from coffeeshop.infrastructure.config import Settings
from coffeeshop.infrastructure.logging_config import setup_logging
from coffeeshop.infrastructure.web.errors import register_error_handlers
from coffeeshop.infrastructure.web.routes import router

API_VERSION = "0.1.0"


def create_app(container: Container | None = None) -> FastAPI:
    if container is None:
        settings = Settings.from_env()
        setup_logging(settings.log_level, settings.log_file)
        container = build_container(settings)

    app = FastAPI(title="Coffee Shop API", version=API_VERSION)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    register_error_handlers(app)
    return app
