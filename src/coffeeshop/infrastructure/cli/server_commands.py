"""CLI command that runs the HTTP API."""

from __future__ import annotations

import logging

import click
import uvicorn

from coffeeshop.infrastructure.bootstrap import build_container
from coffeeshop.infrastructure.config import Settings
from coffeeshop.infrastructure.logging_config import setup_logging
from coffeeshop.infrastructure.web.app import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: $HOST).")
@click.option("--port", default=None, type=int, help="Port to listen on (default: $PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the shop API in the foreground."""
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    app = create_app(build_container(settings))
    host = host or settings.host
    port = port or settings.port

    logger.info("Coffee Shop server running on %s:%s", host, port)
    logger.info("Environment: %s", settings.environment)
    # One worker only: the stores live in this process.
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())
