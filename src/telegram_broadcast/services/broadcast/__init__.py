# -*- coding: utf-8 -*-
"""Broadcast orchestration."""

from telegram_broadcast.services.broadcast.broadcast_service import BroadcastService

__all__ = ["BroadcastService"]
