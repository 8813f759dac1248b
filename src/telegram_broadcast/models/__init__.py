# -*- coding: utf-8 -*-
"""Domain models."""

from telegram_broadcast.models.outcome import DispatchOutcome, OutcomeStatus, RecipientId
from telegram_broadcast.models.report import BroadcastReport, FailedRecipient
from telegram_broadcast.models.membership import ChatInfo, MembershipResult
from telegram_broadcast.models.requests import BroadcastRequest, MembershipRequest

__all__ = [
    "BroadcastReport",
    "BroadcastRequest",
    "ChatInfo",
    "DispatchOutcome",
    "FailedRecipient",
    "MembershipRequest",
    "MembershipResult",
    "OutcomeStatus",
    "RecipientId",
]
