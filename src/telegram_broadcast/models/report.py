"""BroadcastReport: aggregate result of one broadcast invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from telegram_broadcast.models.outcome import RecipientId


@dataclass(frozen=True, slots=True)
class FailedRecipient:
    """One entry of the report's failure sample."""

    recipient_id: RecipientId
    error: str

    def to_dict(self) -> dict[str, Any]:
        return {"userId": self.recipient_id, "error": self.error}


@dataclass(frozen=True, slots=True)
class BroadcastReport:
    """Counts, timing and a bounded failure sample for one broadcast.

    Built once per invocation by ReportBuilder and immutable afterwards.
    """

    total_users: int
    successful: int
    failed: int
    parse_mode: str
    duration_seconds: str | None = None
    """Elapsed dispatch time in seconds, two decimals (e.g. "1.05"). None when nothing was sent."""
    failed_users: tuple[FailedRecipient, ...] = field(default_factory=tuple)
    warning: str | None = None
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the ``data`` object of the broadcast response, omitting unset fields."""
        data: dict[str, Any] = {
            "total_users": self.total_users,
            "successful": self.successful,
            "failed": self.failed,
            "parse_mode": self.parse_mode,
        }
        if self.duration_seconds is not None:
            data["duration_seconds"] = self.duration_seconds
        if self.failed_users:
            data["failed_users"] = [f.to_dict() for f in self.failed_users]
        if self.warning:
            data["warning"] = self.warning
        if self.suggestion:
            data["suggestion"] = self.suggestion
        return data
