"""Broadcast orchestration: verify -> discover -> register -> format -> dispatch -> report."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from telegram_broadcast.models.report import BroadcastReport
from telegram_broadcast.models.requests import BroadcastRequest
from telegram_broadcast.utils.validation import mask_token

if TYPE_CHECKING:
    from telegram_broadcast.clients.telegram import TelegramClientFactory
    from telegram_broadcast.persistence.repositories.interfaces import IRecipientRepository
    from telegram_broadcast.services.discovery import RecipientDiscoveryService
    from telegram_broadcast.services.dispatch import BatchDispatcher
    from telegram_broadcast.services.formatting import BroadcastMessageFormatter
    from telegram_broadcast.services.report import ReportBuilder


class BroadcastService:
    """Run one broadcast for a validated request."""

    def __init__(
        self,
        client_factory: TelegramClientFactory,
        recipient_repository: IRecipientRepository,
        discovery: RecipientDiscoveryService,
        formatter: BroadcastMessageFormatter,
        dispatcher: BatchDispatcher,
        report_builder: ReportBuilder,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            client_factory: Builds a Telegram client per request token.
            recipient_repository: Process-wide registry of known recipients (shared).
            discovery: Recent-sender discovery.
            formatter: Footer styler.
            dispatcher: Batched fan-out.
            report_builder: Report assembly.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._client_factory = client_factory
        self._recipients = recipient_repository
        self._discovery = discovery
        self._formatter = formatter
        self._dispatcher = dispatcher
        self._report_builder = report_builder
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def broadcast(self, request: BroadcastRequest) -> BroadcastReport:
        """Broadcast request.message to every known recipient of the bot.

        Raises:
            CredentialVerificationError: Telegram rejected the token; nothing was sent.
        """
        with bound_contextvars(
            broadcast_id=uuid.uuid4().hex[:12],
            bot_token_masked=mask_token(request.token),
        ):
            async with self._client_factory.create(request.token) as client:
                me = await client.verify()
                self._logger.info(
                    "broadcast_started",
                    bot_username=getattr(me, "username", None),
                    parse_mode=request.parse_mode,
                )

                discovered = await self._discovery.discover(client)
                added = await self._recipients.merge(discovered)
                recipients = await self._recipients.snapshot()
                self._logger.info(
                    "broadcast_recipients_resolved",
                    recipients_discovered=len(discovered),
                    recipients_new=added,
                    recipients_total=len(recipients),
                )

                if not recipients:
                    self._logger.info("broadcast_no_recipients")
                    return self._report_builder.empty(parse_mode=request.parse_mode)

                payload = self._formatter.render(request.message, parse_mode=request.parse_mode)
                result = await self._dispatcher.dispatch(
                    client,
                    recipients,
                    payload,
                    parse_mode=request.parse_mode,
                )

            report = self._report_builder.build(
                result.outcomes,
                total_users=len(recipients),
                elapsed_seconds=result.elapsed_seconds,
                parse_mode=request.parse_mode,
            )
            self._logger.info(
                "broadcast_completed",
                total_users=report.total_users,
                successful=report.successful,
                failed=report.failed,
                duration_seconds=report.duration_seconds,
            )
            return report
