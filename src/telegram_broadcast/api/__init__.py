# -*- coding: utf-8 -*-
"""HTTP surface (aiohttp.web)."""

from telegram_broadcast.api.app import create_app

__all__ = ["create_app"]
