"""In-memory repository implementations."""

from telegram_broadcast.persistence.repositories.in_memory.recipient_repository import (
    InMemoryRecipientRepository,
)

__all__ = ["InMemoryRecipientRepository"]
