# -*- coding: utf-8 -*-
"""Batched, rate-limited message fan-out."""

from telegram_broadcast.services.dispatch.batch_dispatcher import (
    BatchDispatcher,
    DispatchResult,
    MessageSender,
    partition,
)

__all__ = ["BatchDispatcher", "DispatchResult", "MessageSender", "partition"]
