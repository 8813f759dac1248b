"""Remote service clients."""

from telegram_broadcast.clients.telegram import TelegramBotClient, TelegramClientFactory

__all__ = ["TelegramBotClient", "TelegramClientFactory"]
