# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from telegram_broadcast.api.handlers.broadcast import BroadcastHandler
from telegram_broadcast.api.handlers.membership import MembershipHandler
from telegram_broadcast.clients.telegram import TelegramClientFactory
from telegram_broadcast.config import Settings, get_settings
from telegram_broadcast.persistence.repositories.in_memory import InMemoryRecipientRepository
from telegram_broadcast.services.broadcast import BroadcastService
from telegram_broadcast.services.discovery import RecipientDiscoveryService
from telegram_broadcast.services.dispatch import BatchDispatcher
from telegram_broadcast.services.formatting import BroadcastMessageFormatter
from telegram_broadcast.services.membership import MembershipService
from telegram_broadcast.services.report import ReportBuilder


def _build_dispatcher(settings: Settings) -> BatchDispatcher:
    """Build the dispatcher with batch size and cooldown from settings."""
    cfg = settings.broadcast
    return BatchDispatcher(
        batch_size=cfg.batch_size,
        batch_delay_seconds=cfg.batch_delay_seconds,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, Telegram client factory, registry and services."""

    config = providers.Callable(get_settings)

    telegram_client_factory = providers.Singleton(
        TelegramClientFactory,
        settings=config,
    )

    # Process-wide: recipients discovered by one broadcast stay targets for later ones.
    recipient_repository = providers.Singleton(InMemoryRecipientRepository)

    recipient_discovery = providers.Singleton(
        RecipientDiscoveryService,
        limit=providers.Callable(lambda s: s.broadcast.discovery_limit, config),
    )

    message_formatter = providers.Singleton(BroadcastMessageFormatter)

    batch_dispatcher = providers.Singleton(_build_dispatcher, config)

    report_builder = providers.Singleton(
        ReportBuilder,
        failure_sample_size=providers.Callable(lambda s: s.broadcast.failure_sample_size, config),
    )

    broadcast_service = providers.Singleton(
        BroadcastService,
        client_factory=telegram_client_factory,
        recipient_repository=recipient_repository,
        discovery=recipient_discovery,
        formatter=message_formatter,
        dispatcher=batch_dispatcher,
        report_builder=report_builder,
    )

    membership_service = providers.Singleton(
        MembershipService,
        client_factory=telegram_client_factory,
    )

    broadcast_handler = providers.Singleton(
        BroadcastHandler,
        broadcast_service=broadcast_service,
        default_parse_mode=providers.Callable(lambda s: s.broadcast.default_parse_mode, config),
    )

    membership_handler = providers.Singleton(
        MembershipHandler,
        membership_service=membership_service,
    )
