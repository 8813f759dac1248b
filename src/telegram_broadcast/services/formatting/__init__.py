"""Broadcast payload formatting."""

from telegram_broadcast.services.formatting.message_formatter import (
    BroadcastMessageFormatter,
    footer_text,
)

__all__ = ["BroadcastMessageFormatter", "footer_text"]
