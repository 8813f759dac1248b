# -*- coding: utf-8 -*-
"""Utility modules."""

from telegram_broadcast.utils.dedupe import unique_recipients
from telegram_broadcast.utils.validation import (
    clean_chat_identifier,
    clean_str,
    is_numeric_chat_id,
    mask_token,
    normalize_parse_mode,
    parse_user_id,
)

__all__ = [
    "clean_chat_identifier",
    "clean_str",
    "is_numeric_chat_id",
    "mask_token",
    "normalize_parse_mode",
    "parse_user_id",
    "unique_recipients",
]
