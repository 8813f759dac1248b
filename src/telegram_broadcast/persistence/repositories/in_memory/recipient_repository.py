# -*- coding: utf-8 -*-
"""In-memory recipient registry (lives as long as the serving process)."""

from __future__ import annotations

from collections.abc import Iterable

from telegram_broadcast.models.outcome import RecipientId
from telegram_broadcast.persistence.repositories.interfaces.recipient_repository import (
    IRecipientRepository,
)


class InMemoryRecipientRepository(IRecipientRepository):
    """In-memory implementation of IRecipientRepository.

    Backed by a dict used as an insertion-ordered set. merge() performs no
    await between reading and writing the store, so under asyncio each call
    is a single atomic union.
    """

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[RecipientId, None] = {}

    async def merge(self, recipient_ids: Iterable[RecipientId]) -> int:
        before = len(self._store)
        self._store.update(dict.fromkeys(recipient_ids))
        return len(self._store) - before

    async def snapshot(self) -> tuple[RecipientId, ...]:
        return tuple(self._store)

    async def contains(self, recipient_id: RecipientId) -> bool:
        return recipient_id in self._store

    async def count(self) -> int:
        return len(self._store)
