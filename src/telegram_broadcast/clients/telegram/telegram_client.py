# -*- coding: utf-8 -*-
"""Async facade over python-telegram-bot's Bot for the calls this service needs.

One client is built per request from the caller-supplied token. Use it as an
async context manager so the underlying HTTPX connection pools are closed.
"""

from __future__ import annotations

import structlog
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from telegram import Bot, LinkPreviewOptions
from telegram.error import InvalidToken, TelegramError
from telegram.request import HTTPXRequest

from telegram_broadcast.exceptions import CredentialVerificationError
from telegram_broadcast.utils.validation import mask_token

if TYPE_CHECKING:
    from telegram import ChatFullInfo, ChatMember, Update, User

    from telegram_broadcast.config import Settings


def error_description(exc: BaseException) -> str:
    """Return the Telegram-supplied description of an error, or its text."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or type(exc).__name__


def api_value(value: Any) -> str:
    """Return the raw Bot API string of an enum field (member status, chat type)."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class TelegramBotClient:
    """Thin async wrapper around telegram.Bot."""

    def __init__(
        self,
        bot: Bot,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            bot: Configured (not yet initialized) telegram.Bot.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._bot = bot
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def __aenter__(self) -> TelegramBotClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Shut down the bot's HTTP connection pools."""
        try:
            await self._bot.shutdown()
        except Exception as exc:  # pragma: no cover - shutdown is best effort
            self._logger.warning(
                "telegram_client_shutdown_error",
                error_type=type(exc).__name__,
                error_message=str(exc),
            )

    async def verify(self) -> "User":
        """Check the token with getMe and return the bot's own user.

        Raises:
            CredentialVerificationError: Telegram rejected the token or could not be reached.
        """
        try:
            await self._bot.initialize()
            return self._bot.bot
        except InvalidToken as exc:
            raise CredentialVerificationError(
                "Bot token was rejected by Telegram", cause=exc
            ) from exc
        except TelegramError as exc:
            raise CredentialVerificationError(error_description(exc), cause=exc) from exc

    async def get_webhook_url(self) -> str:
        """Return the configured webhook URL ('' when updates are polled)."""
        info = await self._bot.get_webhook_info()
        return info.url or ""

    async def get_updates(self, *, limit: Optional[int] = None) -> tuple["Update", ...]:
        """Fetch pending updates without acknowledging them (no offset)."""
        return tuple(await self._bot.get_updates(limit=limit))

    async def send_message(self, chat_id: int, text: str, *, parse_mode: str) -> None:
        """Send text to chat_id with link previews disabled."""
        await self._bot.send_message(
            chat_id=chat_id,
            text=text,
            parse_mode=parse_mode,
            link_preview_options=LinkPreviewOptions(is_disabled=True),
        )

    async def get_chat(self, chat_id: Union[int, str]) -> "ChatFullInfo":
        return await self._bot.get_chat(chat_id=chat_id)

    async def get_chat_member(self, chat_id: Union[int, str], user_id: int) -> "ChatMember":
        return await self._bot.get_chat_member(chat_id=chat_id, user_id=user_id)


class TelegramClientFactory:
    """Build a TelegramBotClient for a caller-supplied token using transport settings."""

    def __init__(
        self,
        settings: "Settings",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._settings = settings
        self._get_logger = get_logger
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _request(self) -> HTTPXRequest:
        cfg = self._settings.telegram
        return HTTPXRequest(
            connection_pool_size=cfg.connection_pool_size,
            connect_timeout=cfg.connect_timeout,
            read_timeout=cfg.read_timeout,
            write_timeout=cfg.write_timeout,
            pool_timeout=cfg.pool_timeout,
        )

    def create(self, token: str) -> TelegramBotClient:
        """Return a new client for token. The caller owns it and must close it."""
        self._logger.debug("telegram_client_created", bot_token_masked=mask_token(token))
        bot = Bot(token=token, request=self._request(), get_updates_request=self._request())
        return TelegramBotClient(bot, get_logger=self._get_logger)
