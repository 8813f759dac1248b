# -*- coding: utf-8 -*-
"""HTTP tests for the root and /api/broadcast endpoints."""

from __future__ import annotations

import re
from collections.abc import AsyncIterator, Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import Mock

import pytest
from aiohttp.test_utils import TestClient, TestServer
from dependency_injector import providers
from telegram.error import Forbidden

from telegram_broadcast.api import create_app
from telegram_broadcast.constants import NO_RECIPIENTS_WARNING
from telegram_broadcast.DI import Container
from telegram_broadcast.exceptions import CredentialVerificationError
from telegram_broadcast.services.dispatch import BatchDispatcher


@pytest.fixture
def telegram(fake_client_factory: Callable[..., Any]) -> SimpleNamespace:
    """Client factory stand-in; tests swap ``telegram.client`` before calling the API."""
    stub = SimpleNamespace(client=fake_client_factory())
    stub.create = Mock(side_effect=lambda token: stub.client)
    return stub


@pytest.fixture
def container(telegram: SimpleNamespace, no_sleep: Any) -> Container:
    c = Container()
    c.telegram_client_factory.override(providers.Object(telegram))
    c.batch_dispatcher.override(providers.Object(BatchDispatcher(sleep=no_sleep)))
    return c


@pytest.fixture
async def http_client(container: Container) -> AsyncIterator[TestClient]:
    async with TestClient(TestServer(create_app(container))) as client:
        yield client


async def test_root_returns_help_with_meta(http_client: TestClient) -> None:
    resp = await http_client.get("/")

    assert resp.status == 200
    body = await resp.json()
    assert body["status"] == "success"
    assert body["message"] == "Telegram Broadcast API"
    assert body["endpoints"] == {"broadcast": "/api/broadcast", "membership_check": "/api/check"}
    assert body["meta"]["version"] == "v1.0.0"
    assert body["meta"]["developer"] == "@InayatGaming on Telegram"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", body["meta"]["timestamp"])


async def test_broadcast_get_without_query_returns_help(http_client: TestClient) -> None:
    resp = await http_client.get("/api/broadcast")

    assert resp.status == 200
    assert (await resp.json())["message"] == "Telegram Broadcast API"


async def test_broadcast_missing_message_is_400_without_telegram_calls(
    telegram: SimpleNamespace,
    http_client: TestClient,
    bot_token: str,
    fake_client_factory: Callable[..., Any],
) -> None:
    client = fake_client_factory()
    telegram.client = client

    resp = await http_client.get("/api/broadcast", params={"token": bot_token})

    assert resp.status == 400
    body = await resp.json()
    assert body["status"] == "error"
    assert body["message"] == "Missing required parameters: token or message"
    assert "meta" in body
    client.verify.assert_not_awaited()


async def test_broadcast_invalid_parse_mode_is_400(http_client: TestClient, bot_token: str) -> None:
    resp = await http_client.post(
        "/api/broadcast",
        json={"token": bot_token, "message": "hi", "parse_mode": "BBCode"},
    )

    assert resp.status == 400
    assert (await resp.json())["code"] == "INVALID_PARSE_MODE"


async def test_broadcast_malformed_json_is_400(http_client: TestClient) -> None:
    resp = await http_client.post(
        "/api/broadcast",
        data=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status == 400
    assert (await resp.json())["code"] == "INVALID_JSON"


async def test_broadcast_rejected_token_is_500(
    telegram: SimpleNamespace,
    http_client: TestClient,
    bot_token: str,
    fake_client_factory: Callable[..., Any],
) -> None:
    client = fake_client_factory(
        verify_error=CredentialVerificationError("Bot token was rejected by Telegram")
    )
    telegram.client = client

    resp = await http_client.post("/api/broadcast", json={"token": bot_token, "message": "hi"})

    assert resp.status == 500
    body = await resp.json()
    assert body["message"] == "Broadcast failed"
    assert body["error"] == "Bot token was rejected by Telegram"
    client.send_message.assert_not_awaited()


async def test_broadcast_without_recipients_returns_warning(
    telegram: SimpleNamespace,
    http_client: TestClient,
    bot_token: str,
    fake_client_factory: Callable[..., Any],
) -> None:
    telegram.client = fake_client_factory()

    resp = await http_client.get("/api/broadcast", params={"token": bot_token, "message": "hi"})

    assert resp.status == 200
    data = (await resp.json())["data"]
    assert data["total_users"] == 0
    assert data["successful"] == 0
    assert data["failed"] == 0
    assert data["warning"] == NO_RECIPIENTS_WARNING


async def test_broadcast_form_post_reports_partial_failure(
    telegram: SimpleNamespace,
    http_client: TestClient,
    bot_token: str,
    fake_client_factory: Callable[..., Any],
    update_factory: Callable[[int | None], SimpleNamespace],
) -> None:
    client = fake_client_factory(
        updates=[update_factory(1), update_factory(2)],
        failing={2: Forbidden("Forbidden: bot was blocked by the user")},
    )
    telegram.client = client

    resp = await http_client.post(
        "/api/broadcast",
        data={"token": bot_token, "message": "<b>News</b>", "parse_mode": "html"},
    )

    assert resp.status == 200
    body = await resp.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["total_users"] == 2
    assert data["successful"] == 1
    assert data["failed"] == 1
    assert data["parse_mode"] == "HTML"
    assert data["failed_users"] == [
        {"userId": 2, "error": "Forbidden: bot was blocked by the user"}
    ]
    assert data["suggestion"] == "Store user IDs in database for better results"
    assert isinstance(data["duration_seconds"], str)


async def test_broadcast_unexpected_error_is_500(
    telegram: SimpleNamespace,
    http_client: TestClient,
    bot_token: str,
    fake_client_factory: Callable[..., Any],
) -> None:
    client = fake_client_factory()
    client.verify.side_effect = RuntimeError("boom")
    telegram.client = client

    resp = await http_client.get("/api/broadcast", params={"token": bot_token, "message": "hi"})

    assert resp.status == 500
    body = await resp.json()
    assert body["message"] == "Internal server error"
    assert body["error"] == "boom"


async def test_short_broadcast_path_is_an_alias(http_client: TestClient) -> None:
    resp = await http_client.post("/broadcast", json={"message": "hi"})

    assert resp.status == 400
    assert (await resp.json())["message"] == "Missing required parameters: token or message"
