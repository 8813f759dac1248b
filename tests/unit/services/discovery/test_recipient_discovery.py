# -*- coding: utf-8 -*-
"""Unit tests for RecipientDiscoveryService."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

from telegram.error import Conflict, TimedOut

from telegram_broadcast.services.discovery.recipient_discovery import RecipientDiscoveryService


async def test_discover_polling_reads_last_100_updates_and_dedupes(
    fake_client_factory: Callable[..., Any],
    update_factory: Callable[[int | None], SimpleNamespace],
) -> None:
    client = fake_client_factory(
        updates=[update_factory(uid) for uid in (11, 12, 11, 13, 12)],
    )

    found = await RecipientDiscoveryService().discover(client)

    assert found == [11, 12, 13]
    client.get_updates.assert_awaited_once_with(limit=100)


async def test_discover_skips_updates_without_message_sender(
    fake_client_factory: Callable[..., Any],
    update_factory: Callable[[int | None], SimpleNamespace],
) -> None:
    no_sender = SimpleNamespace(message=SimpleNamespace(from_user=None))
    client = fake_client_factory(
        updates=[update_factory(None), no_sender, update_factory(42)],
    )

    found = await RecipientDiscoveryService().discover(client)

    assert found == [42]


async def test_discover_with_webhook_requests_updates_without_limit(
    fake_client_factory: Callable[..., Any],
    update_factory: Callable[[int | None], SimpleNamespace],
) -> None:
    client = fake_client_factory(
        webhook_url="https://example.com/hook",
        updates=[update_factory(5)],
    )

    found = await RecipientDiscoveryService(limit=100).discover(client)

    assert found == [5]
    client.get_updates.assert_awaited_once_with()


async def test_discover_returns_empty_when_webhook_blocks_get_updates(
    fake_client_factory: Callable[..., Any],
) -> None:
    client = fake_client_factory(webhook_url="https://example.com/hook")
    client.get_updates.side_effect = Conflict(
        "Conflict: can't use getUpdates method while webhook is active"
    )

    found = await RecipientDiscoveryService().discover(client)

    assert found == []


async def test_discover_returns_empty_when_webhook_info_fails(
    fake_client_factory: Callable[..., Any],
) -> None:
    client = fake_client_factory()
    client.get_webhook_url.side_effect = TimedOut()

    found = await RecipientDiscoveryService().discover(client)

    assert found == []
    client.get_updates.assert_not_awaited()


async def test_discover_returns_empty_for_empty_feed(
    fake_client_factory: Callable[..., Any],
) -> None:
    found = await RecipientDiscoveryService().discover(fake_client_factory())

    assert found == []


async def test_discover_uses_configured_limit(
    fake_client_factory: Callable[..., Any],
) -> None:
    client = fake_client_factory()

    await RecipientDiscoveryService(limit=25).discover(client)

    client.get_updates.assert_awaited_once_with(limit=25)
