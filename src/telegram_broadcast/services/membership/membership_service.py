"""Membership check: resolve a chat, then the user's member status in it."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from telegram.error import TelegramError

from telegram_broadcast.clients.telegram import error_description, api_value
from telegram_broadcast.exceptions import MembershipCheckError
from telegram_broadcast.models.membership import ChatInfo, MembershipResult
from telegram_broadcast.models.requests import MembershipRequest
from telegram_broadcast.utils.validation import is_numeric_chat_id, mask_token

if TYPE_CHECKING:
    from telegram_broadcast.clients.telegram import TelegramClientFactory


class MembershipService:
    """Check whether a user belongs to (and administers) a group or channel."""

    def __init__(
        self,
        client_factory: TelegramClientFactory,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._client_factory = client_factory
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def check(self, request: MembershipRequest) -> MembershipResult:
        """Look up request.user_id in request.chat.

        Raises:
            MembershipCheckError: Telegram rejected the lookup (bad token, unknown chat or user, no access).
        """
        chat_ref: int | str = (
            int(request.chat) if is_numeric_chat_id(request.chat) else f"@{request.chat}"
        )
        try:
            async with self._client_factory.create(request.token) as client:
                chat = await client.get_chat(chat_ref)
                member = await client.get_chat_member(chat.id, request.user_id)
        except TelegramError as exc:
            self._logger.info(
                "membership_check_failed",
                bot_token_masked=mask_token(request.token),
                chat=str(chat_ref),
                error_type=type(exc).__name__,
                error_message=error_description(exc),
            )
            raise MembershipCheckError(error_description(exc), cause=exc) from exc

        if isinstance(chat_ref, str):
            username = chat_ref
        elif getattr(chat, "username", None):
            username = f"@{chat.username}"
        else:
            username = str(chat_ref)
        result = MembershipResult(
            user_status=api_value(member.status),
            chat=ChatInfo(
                username=username,
                title=getattr(chat, "title", None),
                type=api_value(chat.type),
            ),
        )
        self._logger.info(
            "membership_checked",
            chat=username,
            user_status=result.user_status,
            is_member=result.is_member,
            is_admin=result.is_admin,
        )
        return result
