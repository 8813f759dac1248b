"""Abstract interface for the known-recipient registry (in-memory, key-value store, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from telegram_broadcast.models.outcome import RecipientId


class IRecipientRepository(ABC):
    """Set of recipient ids that have interacted with the bot.

    Grows monotonically: ids are only ever added, by union. A multi-instance
    deployment needs an implementation backed by shared storage.
    """

    @abstractmethod
    async def merge(self, recipient_ids: Iterable[RecipientId]) -> int:
        """Union recipient_ids into the registry as one mutation. Returns how many were new."""
        ...

    @abstractmethod
    async def snapshot(self) -> tuple[RecipientId, ...]:
        """Return an immutable copy of all ids, in first-seen order."""
        ...

    @abstractmethod
    async def contains(self, recipient_id: RecipientId) -> bool:
        """Return True if recipient_id is registered."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of registered ids."""
        ...
