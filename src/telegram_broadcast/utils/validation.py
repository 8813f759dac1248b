"""Validation and normalisation helpers for request fields."""

from __future__ import annotations

import re
from typing import Any

from telegram.constants import ParseMode

_PARSE_MODES: dict[str, str] = {mode.value.lower(): mode.value for mode in ParseMode}
_NUMERIC_CHAT_ID = re.compile(r"-?\d+")


def clean_str(value: Any) -> str | None:
    """Return value stripped of surrounding whitespace, or None if empty/not a scalar."""
    if value is None or isinstance(value, (dict, list)):
        return None
    s = str(value).strip()
    return s or None


def clean_chat_identifier(value: Any) -> str | None:
    """Strip whitespace and a single leading '@' from a chat username or id."""
    s = clean_str(value)
    if s is None:
        return None
    if s.startswith("@"):
        s = s[1:].strip()
    return s or None


def is_numeric_chat_id(chat: str) -> bool:
    """Return True for numeric chat ids such as '-1001234567890'."""
    return _NUMERIC_CHAT_ID.fullmatch(chat) is not None


def parse_user_id(value: Any) -> int | None:
    """Parse a positive integer user id; None if missing or malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    s = clean_str(value)
    if s is None:
        return None
    try:
        parsed = int(s)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def normalize_parse_mode(value: Any) -> str | None:
    """Map a parse mode (case-insensitive) to Telegram's canonical name; None if unsupported."""
    s = clean_str(value)
    if s is None:
        return None
    return _PARSE_MODES.get(s.lower())


def mask_token(token: str | None) -> str:
    """Return a masked bot token for logging (e.g. 123456:***wxyz)."""
    if not token or len(token) < 10:
        return "***"
    bot_id, _, secret = token.partition(":")
    if not secret:
        return f"***{token[-4:]}"
    return f"{bot_id}:***{secret[-4:]}"
