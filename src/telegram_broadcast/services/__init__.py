"""Application services."""

from telegram_broadcast.services.broadcast import BroadcastService
from telegram_broadcast.services.discovery import RecipientDiscoveryService
from telegram_broadcast.services.dispatch import BatchDispatcher
from telegram_broadcast.services.formatting import BroadcastMessageFormatter
from telegram_broadcast.services.membership import MembershipService
from telegram_broadcast.services.report import ReportBuilder

__all__ = [
    "BatchDispatcher",
    "BroadcastMessageFormatter",
    "BroadcastService",
    "MembershipService",
    "RecipientDiscoveryService",
    "ReportBuilder",
]
