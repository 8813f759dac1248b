"""Batch dispatcher: rate-limited concurrent fan-out of one payload to many recipients."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import structlog
from structlog.contextvars import bound_contextvars

from telegram_broadcast.clients.telegram import error_description
from telegram_broadcast.models.outcome import DispatchOutcome, RecipientId


class MessageSender(Protocol):
    """Anything that can deliver a text message to one chat."""

    async def send_message(self, chat_id: int, text: str, *, parse_mode: str) -> None: ...


@dataclass(frozen=True)
class DispatchResult:
    """Outcomes of one dispatch run, in recipient order, plus elapsed time."""

    outcomes: list[DispatchOutcome]
    elapsed_seconds: float
    batches: int


def partition(recipients: Sequence[RecipientId], size: int) -> list[list[RecipientId]]:
    """Split recipients into consecutive batches of at most size, keeping order."""
    if size < 1:
        raise ValueError("batch size must be >= 1")
    return [list(recipients[i : i + size]) for i in range(0, len(recipients), size)]


class BatchDispatcher:
    """Send a payload to every recipient in fixed-size concurrent batches.

    Within a batch all sends are started before any is awaited, so at most
    ``batch_size`` calls are in flight. Batches run strictly one after the
    other with ``batch_delay_seconds`` of cooldown between them (none after
    the last). A failed send becomes a FAILED outcome and never stops the run.
    """

    DEFAULT_BATCH_SIZE = 20
    DEFAULT_BATCH_DELAY_SECONDS = 1.0

    def __init__(
        self,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        batch_delay_seconds: float = DEFAULT_BATCH_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.perf_counter,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            batch_size: Maximum concurrent sends per batch.
            batch_delay_seconds: Cooldown between batches.
            sleep: Awaitable sleep (injected for tests).
            clock: Monotonic clock in seconds (injected for tests).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        if batch_delay_seconds < 0:
            raise ValueError("batch_delay_seconds must be >= 0")
        self._batch_size = batch_size
        self._batch_delay = batch_delay_seconds
        self._sleep = sleep
        self._clock = clock
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def dispatch(
        self,
        sender: MessageSender,
        recipients: Sequence[RecipientId],
        payload: str,
        *,
        parse_mode: str,
    ) -> DispatchResult:
        """Deliver payload to every recipient and collect one outcome each.

        recipients is treated as a snapshot; its order fixes batch membership
        and the order of the returned outcomes.
        """
        batches = partition(recipients, self._batch_size)
        outcomes: list[DispatchOutcome] = []
        started = self._clock()

        self._logger.info(
            "dispatch_started",
            recipients_total=len(recipients),
            batches_total=len(batches),
            batch_size=self._batch_size,
        )

        for index, batch in enumerate(batches, start=1):
            with bound_contextvars(dispatch_batch=index):
                results = await asyncio.gather(
                    *(self._deliver(sender, rid, payload, parse_mode) for rid in batch)
                )
                outcomes.extend(results)
                failed = sum(1 for o in results if not o.is_delivered)
                self._logger.debug(
                    "dispatch_batch_completed",
                    batch_recipients=len(batch),
                    batch_delivered=len(batch) - failed,
                    batch_failed=failed,
                )

            if index < len(batches) and self._batch_delay > 0:
                await self._sleep(self._batch_delay)

        elapsed = self._clock() - started
        self._logger.info(
            "dispatch_completed",
            recipients_total=len(recipients),
            delivered=sum(1 for o in outcomes if o.is_delivered),
            failed=sum(1 for o in outcomes if not o.is_delivered),
            elapsed_seconds=round(elapsed, 3),
        )
        return DispatchResult(outcomes=outcomes, elapsed_seconds=elapsed, batches=len(batches))

    async def _deliver(
        self,
        sender: MessageSender,
        recipient_id: RecipientId,
        payload: str,
        parse_mode: str,
    ) -> DispatchOutcome:
        try:
            await sender.send_message(recipient_id, payload, parse_mode=parse_mode)
        except Exception as exc:
            reason = error_description(exc)
            self._logger.debug(
                "dispatch_recipient_failed",
                recipient_id=recipient_id,
                error_type=type(exc).__name__,
                error_message=reason,
            )
            return DispatchOutcome.failed(recipient_id, reason)
        return DispatchOutcome.delivered(recipient_id)
