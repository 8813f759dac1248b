"""Recipient discovery: recent message senders from the bot's update feed."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

import structlog

from telegram_broadcast.models.outcome import RecipientId
from telegram_broadcast.utils.dedupe import unique_recipients

if TYPE_CHECKING:
    from telegram import Update

    from telegram_broadcast.clients.telegram import TelegramBotClient


def _sender_ids(updates: Iterable["Update"]) -> list[RecipientId]:
    """Extract message.from_user.id from updates that carry one."""
    ids: list[RecipientId] = []
    for update in updates:
        message = getattr(update, "message", None)
        sender = getattr(message, "from_user", None) if message is not None else None
        sender_id = getattr(sender, "id", None) if sender is not None else None
        if isinstance(sender_id, int):
            ids.append(sender_id)
    return ids


class RecipientDiscoveryService:
    """Best-effort discovery of recipient ids; never raises to the caller."""

    DEFAULT_LIMIT = 100

    def __init__(
        self,
        *,
        limit: int = DEFAULT_LIMIT,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the discovery service.

        Args:
            limit: Updates requested from getUpdates when no webhook is configured.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._limit = limit
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def discover(self, client: "TelegramBotClient") -> list[RecipientId]:
        """Return deduplicated sender ids seen in the bot's recent updates.

        With a webhook set, all updates Telegram still exposes are requested
        (Telegram normally answers with a conflict, which yields an empty
        result). Without one, the most recent ``limit`` updates are read.
        Any failure is logged and an empty list returned.
        """
        mode = "unknown"
        try:
            webhook_url = await client.get_webhook_url()
            if webhook_url:
                mode = "webhook"
                updates = await client.get_updates()
            else:
                mode = "polling"
                updates = await client.get_updates(limit=self._limit)
        except Exception as e:
            self._logger.warning(
                "discovery_failed",
                discovery_mode=mode,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return []

        recipients = unique_recipients(_sender_ids(updates))
        self._logger.info(
            "discovery_completed",
            discovery_mode=mode,
            updates_read=len(updates),
            recipients_found=len(recipients),
        )
        return recipients
