# -*- coding: utf-8 -*-
"""Telegram Bot API client (python-telegram-bot)."""

from telegram_broadcast.clients.telegram.telegram_client import (
    TelegramBotClient,
    TelegramClientFactory,
    error_description,
    api_value,
)

__all__ = [
    "TelegramBotClient",
    "TelegramClientFactory",
    "error_description",
    "api_value",
]
