# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, etc.)."""

from telegram_broadcast.persistence.repositories.interfaces import IRecipientRepository
from telegram_broadcast.persistence.repositories.in_memory import InMemoryRecipientRepository

__all__ = ["IRecipientRepository", "InMemoryRecipientRepository"]
