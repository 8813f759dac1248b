# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/."""

from telegram_broadcast.persistence.repositories.interfaces.recipient_repository import (
    IRecipientRepository,
)

__all__ = ["IRecipientRepository"]
