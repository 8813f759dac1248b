"""HTTP handlers."""

from telegram_broadcast.api.handlers.broadcast import BroadcastHandler
from telegram_broadcast.api.handlers.membership import MembershipHandler

__all__ = ["BroadcastHandler", "MembershipHandler"]
