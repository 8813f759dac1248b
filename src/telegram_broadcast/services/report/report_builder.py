"""Build the BroadcastReport returned to the caller."""

from __future__ import annotations

from collections.abc import Sequence

from telegram_broadcast.constants import NO_RECIPIENTS_WARNING, STORE_RECIPIENTS_SUGGESTION
from telegram_broadcast.models.outcome import DispatchOutcome
from telegram_broadcast.models.report import BroadcastReport, FailedRecipient


def format_duration(seconds: float) -> str:
    """Format elapsed seconds with two decimals, e.g. 1.0049 -> '1.00'."""
    return f"{max(seconds, 0.0):.2f}"


class ReportBuilder:
    """Aggregate dispatch outcomes into a BroadcastReport."""

    DEFAULT_FAILURE_SAMPLE_SIZE = 5

    def __init__(self, *, failure_sample_size: int = DEFAULT_FAILURE_SAMPLE_SIZE) -> None:
        self._sample_size = max(0, failure_sample_size)

    def build(
        self,
        outcomes: Sequence[DispatchOutcome],
        *,
        total_users: int,
        elapsed_seconds: float,
        parse_mode: str,
    ) -> BroadcastReport:
        """Count outcomes and keep the first failures, in outcome order."""
        failures = [o for o in outcomes if not o.is_delivered]
        sample = tuple(
            FailedRecipient(recipient_id=o.recipient_id, error=o.error or "Unknown error")
            for o in failures[: self._sample_size]
        )
        return BroadcastReport(
            total_users=total_users,
            successful=len(outcomes) - len(failures),
            failed=len(failures),
            parse_mode=parse_mode,
            duration_seconds=format_duration(elapsed_seconds),
            failed_users=sample,
            suggestion=STORE_RECIPIENTS_SUGGESTION,
        )

    def empty(self, *, parse_mode: str) -> BroadcastReport:
        """Zero-count report for a bot nobody has interacted with yet."""
        return BroadcastReport(
            total_users=0,
            successful=0,
            failed=0,
            parse_mode=parse_mode,
            warning=NO_RECIPIENTS_WARNING,
        )
