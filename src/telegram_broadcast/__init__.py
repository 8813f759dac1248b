"""Telegram broadcast API: batched message fan-out and membership checks."""

from telegram_broadcast.api import create_app
from telegram_broadcast.config import get_settings
from telegram_broadcast.DI import Container
from telegram_broadcast.services import BatchDispatcher, BroadcastService, MembershipService

__version__ = "1.0.0"
__all__ = [
    "BatchDispatcher",
    "BroadcastService",
    "Container",
    "MembershipService",
    "create_app",
    "get_settings",
]
