# -*- coding: utf-8 -*-
"""Recipient discovery from the bot's update feed."""

from telegram_broadcast.services.discovery.recipient_discovery import RecipientDiscoveryService

__all__ = ["RecipientDiscoveryService"]
