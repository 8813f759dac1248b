# -*- coding: utf-8 -*-
"""aiohttp application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from aiohttp import web

if TYPE_CHECKING:
    from telegram_broadcast.DI import Container


def create_app(container: Optional["Container"] = None) -> web.Application:
    """Build the web application and register routes.

    Args:
        container: DI container; a fresh one is created when omitted. Tests pass a
            container with overridden providers.
    """
    if container is None:
        from telegram_broadcast.DI import Container

        container = Container()

    broadcast = container.broadcast_handler()
    membership = container.membership_handler()

    app = web.Application()
    app.router.add_get("/", broadcast.root)
    app.router.add_route("GET", "/api/broadcast", broadcast.broadcast)
    app.router.add_route("POST", "/api/broadcast", broadcast.broadcast)
    app.router.add_route("GET", "/broadcast", broadcast.broadcast)
    app.router.add_route("POST", "/broadcast", broadcast.broadcast)
    app.router.add_route("*", "/api/check", membership.check)
    return app
