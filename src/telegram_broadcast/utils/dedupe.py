"""Order-preserving de-duplication of recipient ids."""

from __future__ import annotations

from collections.abc import Iterable

from telegram_broadcast.models.outcome import RecipientId


def unique_recipients(ids: Iterable[RecipientId]) -> list[RecipientId]:
    """Return ids without duplicates, keeping first-seen order."""
    return list(dict.fromkeys(ids))
