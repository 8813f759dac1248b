# -*- coding: utf-8 -*-
"""HTTP handler for the broadcast endpoint."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from aiohttp import web

from telegram_broadcast.api.params import read_params
from telegram_broadcast.api.responses import broadcast_json
from telegram_broadcast.exceptions import CredentialVerificationError, RequestValidationError
from telegram_broadcast.models.requests import BroadcastRequest

if TYPE_CHECKING:
    from telegram_broadcast.services.broadcast import BroadcastService


class BroadcastHandler:
    """GET|POST /api/broadcast and the root help document."""

    def __init__(
        self,
        broadcast_service: BroadcastService,
        *,
        default_parse_mode: str = "HTML",
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._service = broadcast_service
        self._default_parse_mode = default_parse_mode
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def root(self, request: web.Request) -> web.Response:
        return broadcast_json(
            "success",
            message="Telegram Broadcast API",
            endpoints={
                "broadcast": "/api/broadcast",
                "membership_check": "/api/check",
            },
            usage={
                "broadcast": "Send a message to all bot users",
                "membership_check": "Check user membership in groups/channels",
            },
        )

    async def broadcast(self, request: web.Request) -> web.Response:
        if request.method == "GET" and not request.query:
            return await self.root(request)
        try:
            params = await read_params(request)
            broadcast_request = BroadcastRequest.from_params(
                params, default_parse_mode=self._default_parse_mode
            )
        except RequestValidationError as e:
            self._logger.info("broadcast_request_rejected", reason=e.message, code=e.code)
            data: dict[str, Any] = {"message": e.message}
            if e.code:
                data["code"] = e.code
            return broadcast_json("error", http_status=400, **data)

        try:
            report = await self._service.broadcast(broadcast_request)
        except CredentialVerificationError as e:
            self._logger.warning("broadcast_credential_rejected", error_message=e.description)
            return broadcast_json(
                "error",
                http_status=500,
                message="Broadcast failed",
                error=e.description,
            )
        except Exception as e:
            self._logger.exception(
                "broadcast_internal_error",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return broadcast_json(
                "error",
                http_status=500,
                message="Internal server error",
                error=str(e),
            )
        return broadcast_json("success", data=report.to_dict())
