"""Dependency injection."""

from telegram_broadcast.DI.container import Container

__all__ = ["Container"]
