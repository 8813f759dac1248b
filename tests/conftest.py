# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from telegram_broadcast.persistence.repositories.in_memory.recipient_repository import (
    InMemoryRecipientRepository,
)


class FakeTelegramClient:
    """Stand-in for TelegramBotClient with AsyncMock methods.

    send_message raises the exception mapped to a chat id in ``failing``.
    """

    def __init__(
        self,
        *,
        updates: Iterable[Any] = (),
        webhook_url: str = "",
        failing: dict[int, Exception] | None = None,
        verify_error: Exception | None = None,
    ) -> None:
        self.failing = dict(failing or {})
        self.sent: list[int] = []
        self.closed = False
        self.verify = AsyncMock(return_value=SimpleNamespace(id=1, username="test_bot"))
        if verify_error is not None:
            self.verify.side_effect = verify_error
        self.get_webhook_url = AsyncMock(return_value=webhook_url)
        self.get_updates = AsyncMock(return_value=tuple(updates))
        self.send_message = AsyncMock(side_effect=self._send)
        self.get_chat = AsyncMock()
        self.get_chat_member = AsyncMock()

    async def _send(self, chat_id: int, text: str, *, parse_mode: str) -> None:
        if chat_id in self.failing:
            raise self.failing[chat_id]
        self.sent.append(chat_id)

    async def __aenter__(self) -> FakeTelegramClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.closed = True


def make_update(user_id: int | None) -> SimpleNamespace:
    """Update-like object whose message was sent by user_id (None: no message)."""
    if user_id is None:
        return SimpleNamespace(message=None)
    return SimpleNamespace(message=SimpleNamespace(from_user=SimpleNamespace(id=user_id)))


@pytest.fixture
def bot_token() -> str:
    """Syntactically valid bot token used by tests."""
    return "123456789:AAEexampleexampleexampleexampleABCD"


@pytest.fixture
def recipient_repo() -> InMemoryRecipientRepository:
    """Fresh in-memory recipient registry per test."""
    return InMemoryRecipientRepository()


@pytest.fixture
def fake_client_factory() -> Callable[..., FakeTelegramClient]:
    """Build FakeTelegramClient with overrides."""

    def _build(**kwargs: Any) -> FakeTelegramClient:
        return FakeTelegramClient(**kwargs)

    return _build


@pytest.fixture
def client_factory_for() -> Callable[[FakeTelegramClient], SimpleNamespace]:
    """Wrap a fake client in a factory whose create() always returns it."""

    def _wrap(client: FakeTelegramClient) -> SimpleNamespace:
        return SimpleNamespace(create=Mock(return_value=client))

    return _wrap


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Awaitable sleep that records delays without waiting."""
    return AsyncMock(return_value=None)


@pytest.fixture
def update_factory() -> Callable[[int | None], SimpleNamespace]:
    """Build Update-like objects (see make_update)."""
    return make_update
