"""Configuration subpackage."""

from telegram_broadcast.config.config import (
    AppSettings,
    BroadcastSettings,
    LoggingSettings,
    ServerSettings,
    Settings,
    TelegramSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "BroadcastSettings",
    "LoggingSettings",
    "ServerSettings",
    "Settings",
    "TelegramSettings",
    "get_settings",
]
