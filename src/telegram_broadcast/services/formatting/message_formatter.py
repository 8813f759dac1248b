# -*- coding: utf-8 -*-
"""Broadcast payload styler: caller message plus a fixed attribution footer."""

from __future__ import annotations

from telegram.constants import ParseMode
from telegram.helpers import escape_markdown

from telegram_broadcast.constants import BROADCAST_API_VERSION, BROADCAST_ATTRIBUTION


def footer_text() -> str:
    """Return the plain attribution line appended to every broadcast."""
    return (
        f"✨ This broadcast sent via Broadcast API {BROADCAST_API_VERSION} "
        f"Made With ❤️ By {BROADCAST_ATTRIBUTION['developer']} ✨"
    )


class BroadcastMessageFormatter:
    """Append the attribution footer, rendered in the message's markup mode.

    Output depends only on the inputs; the caller's body is passed through
    untouched and only the footer is marked up.
    """

    def render(self, body: str, *, parse_mode: str = ParseMode.HTML) -> str:
        """Return ``body`` followed by a blank line and the styled footer."""
        return f"{body}\n\n{self._footer(parse_mode)}"

    @staticmethod
    def _footer(parse_mode: str) -> str:
        text = footer_text()
        if parse_mode == ParseMode.HTML:
            return f"<b><i><u>{text}</u></i></b>"
        if parse_mode == ParseMode.MARKDOWN_V2:
            return f"*_{escape_markdown(text, version=2)}_*"
        if parse_mode == ParseMode.MARKDOWN:
            return f"*{escape_markdown(text, version=1)}*"
        return text
