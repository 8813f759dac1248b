"""Persistence layer (repositories, etc.)."""

from telegram_broadcast.persistence.repositories import (
    InMemoryRecipientRepository,
    IRecipientRepository,
)

__all__ = ["IRecipientRepository", "InMemoryRecipientRepository"]
