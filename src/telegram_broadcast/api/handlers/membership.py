# -*- coding: utf-8 -*-
"""HTTP handler for the membership-check endpoint."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from aiohttp import web

from telegram_broadcast.api.params import read_params
from telegram_broadcast.api.responses import membership_json
from telegram_broadcast.constants import MEMBERSHIP_API_VERSION
from telegram_broadcast.exceptions import MembershipCheckError, RequestValidationError
from telegram_broadcast.models.requests import MembershipRequest

if TYPE_CHECKING:
    from telegram_broadcast.services.membership import MembershipService

ALLOWED_METHODS = ("GET", "POST")


class MembershipHandler:
    """GET|POST /api/check; any other method is answered with 405."""

    def __init__(
        self,
        membership_service: MembershipService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._service = membership_service
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def help(self, request: web.Request) -> web.Response:
        return membership_json(
            "success",
            message="Telegram Membership Checker API",
            usage="/api/check?token=BOT_TOKEN&user_id=123456789&chat_id=JunnioMarket",
            note='Remove "@", it is handled automatically.',
            method=list(ALLOWED_METHODS),
            version=MEMBERSHIP_API_VERSION,
        )

    async def check(self, request: web.Request) -> web.Response:
        if request.method not in ALLOWED_METHODS:
            return membership_json(
                "error",
                http_status=405,
                code="METHOD_NOT_ALLOWED",
                message="Only GET and POST supported.",
            )
        if request.method == "GET" and "token" not in request.query:
            return await self.help(request)

        try:
            params = await read_params(request)
            membership_request = MembershipRequest.from_params(params)
        except RequestValidationError as e:
            self._logger.info("membership_request_rejected", reason=e.message, code=e.code)
            data: dict[str, Any] = {"message": e.message}
            if e.code:
                data["code"] = e.code
            return membership_json("error", http_status=400, **data)

        try:
            result = await self._service.check(membership_request)
        except MembershipCheckError as e:
            return membership_json(
                "error",
                http_status=400,
                code="MEMBERSHIP_CHECK_FAILED",
                message=e.description,
            )
        except Exception as e:
            self._logger.exception(
                "membership_internal_error",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return membership_json(
                "error",
                http_status=500,
                code="INTERNAL_ERROR",
                message="An unexpected error occurred.",
            )
        return membership_json("success", **result.to_dict())
