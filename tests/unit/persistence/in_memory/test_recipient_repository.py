# -*- coding: utf-8 -*-
"""Unit tests for InMemoryRecipientRepository."""

from __future__ import annotations

import asyncio

from telegram_broadcast.persistence.repositories.in_memory.recipient_repository import (
    InMemoryRecipientRepository,
)


async def test_new_repository_is_empty(recipient_repo: InMemoryRecipientRepository) -> None:
    assert await recipient_repo.snapshot() == ()
    assert await recipient_repo.count() == 0


async def test_merge_returns_number_of_new_ids(
    recipient_repo: InMemoryRecipientRepository,
) -> None:
    assert await recipient_repo.merge([1, 2, 3]) == 3
    assert await recipient_repo.merge([3, 4]) == 1
    assert await recipient_repo.count() == 4


async def test_merge_is_idempotent(recipient_repo: InMemoryRecipientRepository) -> None:
    await recipient_repo.merge([10, 20, 30])
    before = await recipient_repo.snapshot()

    added = await recipient_repo.merge([10, 20, 30])

    assert added == 0
    assert await recipient_repo.snapshot() == before


async def test_merge_collapses_duplicates_within_one_call(
    recipient_repo: InMemoryRecipientRepository,
) -> None:
    await recipient_repo.merge([5, 5, 6, 5])

    assert await recipient_repo.snapshot() == (5, 6)


async def test_snapshot_keeps_first_seen_order(
    recipient_repo: InMemoryRecipientRepository,
) -> None:
    await recipient_repo.merge([30, 10])
    await recipient_repo.merge([20, 10, 40])

    assert await recipient_repo.snapshot() == (30, 10, 20, 40)


async def test_snapshot_is_not_affected_by_later_merges(
    recipient_repo: InMemoryRecipientRepository,
) -> None:
    await recipient_repo.merge([1, 2])
    snapshot = await recipient_repo.snapshot()

    await recipient_repo.merge([3])

    assert snapshot == (1, 2)


async def test_contains(recipient_repo: InMemoryRecipientRepository) -> None:
    await recipient_repo.merge([99])

    assert await recipient_repo.contains(99) is True
    assert await recipient_repo.contains(100) is False


async def test_concurrent_merges_lose_nothing(
    recipient_repo: InMemoryRecipientRepository,
) -> None:
    await asyncio.gather(
        *(recipient_repo.merge(range(start, start + 50)) for start in range(0, 500, 25))
    )

    assert sorted(await recipient_repo.snapshot()) == list(range(0, 525))
