"""Validated caller requests for the broadcast and membership endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from telegram_broadcast.exceptions import RequestValidationError
from telegram_broadcast.utils.validation import (
    clean_chat_identifier,
    clean_str,
    is_numeric_chat_id,
    normalize_parse_mode,
    parse_user_id,
)


@dataclass(frozen=True, slots=True)
class BroadcastRequest:
    """Bot token, message body and markup mode for one broadcast."""

    token: str
    message: str
    parse_mode: str

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        *,
        default_parse_mode: str = "HTML",
    ) -> BroadcastRequest:
        """Validate raw query/body parameters.

        Raises:
            RequestValidationError: token or message missing, or parse_mode unsupported.
        """
        token = clean_str(params.get("token"))
        raw_message = params.get("message")
        message = raw_message if isinstance(raw_message, str) and raw_message.strip() else None
        if not token or not message:
            raise RequestValidationError("Missing required parameters: token or message")

        raw_mode = params.get("parse_mode")
        if clean_str(raw_mode) is None:
            raw_mode = default_parse_mode
        parse_mode = normalize_parse_mode(raw_mode)
        if parse_mode is None:
            raise RequestValidationError(
                f"Unsupported parse_mode: {raw_mode!s}. Use HTML, Markdown or MarkdownV2.",
                code="INVALID_PARSE_MODE",
            )
        return cls(token=token, message=message, parse_mode=parse_mode)


@dataclass(frozen=True, slots=True)
class MembershipRequest:
    """Bot token, user and chat for one membership check.

    chat is stored without the leading '@'.
    """

    token: str
    user_id: int
    chat: str

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> MembershipRequest:
        """Validate raw query/body parameters.

        Raises:
            RequestValidationError: any field missing, user_id not a positive integer,
                or chat_id a malformed numeric id.
        """
        token = clean_str(params.get("token"))
        user_id = parse_user_id(params.get("user_id"))
        chat = clean_chat_identifier(params.get("chat_id"))
        if not token or user_id is None or not chat:
            raise RequestValidationError(
                "Missing required parameters: token, user_id, or chat_id."
            )
        if chat.startswith("-") and not is_numeric_chat_id(chat):
            raise RequestValidationError("Invalid chat_id.", code="INVALID_CHAT_ID")
        return cls(token=token, user_id=user_id, chat=chat)
