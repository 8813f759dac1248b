"""DispatchOutcome: per-recipient result of one delivery attempt.

Produced exactly once per recipient per broadcast and never persisted
beyond the response.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RecipientId = int
"""Telegram chat id of a recipient (user ids are positive integers)."""


class OutcomeStatus(str, Enum):
    """Delivery result tag."""

    DELIVERED = "DELIVERED"
    FAILED = "FAILED"


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Tagged delivery result: DELIVERED, or FAILED with the remote error message."""

    recipient_id: RecipientId
    status: OutcomeStatus
    error: str | None = None
    """Remote error message; set only when status is FAILED."""

    @classmethod
    def delivered(cls, recipient_id: RecipientId) -> DispatchOutcome:
        return cls(recipient_id=recipient_id, status=OutcomeStatus.DELIVERED)

    @classmethod
    def failed(cls, recipient_id: RecipientId, reason: str) -> DispatchOutcome:
        return cls(
            recipient_id=recipient_id,
            status=OutcomeStatus.FAILED,
            error=reason or "Unknown error",
        )

    @property
    def is_delivered(self) -> bool:
        return self.status is OutcomeStatus.DELIVERED
