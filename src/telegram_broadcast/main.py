# -*- coding: utf-8 -*-
"""
Entry point for the broadcast API server.

Orchestrates: logging, settings, container, aiohttp application.
Requests flow: handler -> service -> Telegram client.

Run with: python -m telegram_broadcast.main
"""
from __future__ import annotations

import structlog
from aiohttp import web

from telegram_broadcast.api import create_app
from telegram_broadcast.config import get_settings
from telegram_broadcast.DI import Container
from telegram_broadcast.logging.config import configure_logging


def build_app() -> web.Application:
    """Configure logging and return the wired application."""
    configure_logging()
    return create_app(Container())


def main() -> None:
    settings = get_settings()
    app = build_app()
    logger = structlog.get_logger("main")
    logger.info(
        "main_server_starting",
        host=settings.server.host,
        port=settings.server.port,
        environment=settings.app.environment,
    )
    web.run_app(app, host=settings.server.host, port=settings.server.port, print=None)
    logger.info("main_shutdown_complete")


__all__ = ["build_app", "main"]

if __name__ == "__main__":
    main()
