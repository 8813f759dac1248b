"""JSON envelopes shared by the HTTP handlers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from aiohttp import web

from telegram_broadcast.constants import BROADCAST_ATTRIBUTION, MEMBERSHIP_ATTRIBUTION


def _iso_timestamp() -> str:
    """UTC now with millisecond precision and a 'Z' suffix, e.g. 2024-05-01T12:00:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def broadcast_envelope(status: str, **data: Any) -> dict[str, Any]:
    """{status, ...data, meta: {attribution..., timestamp}} as returned by the broadcast API."""
    return {
        "status": status,
        **data,
        "meta": {
            **BROADCAST_ATTRIBUTION,
            "timestamp": _iso_timestamp(),
        },
    }


def membership_envelope(status: str, **data: Any) -> dict[str, Any]:
    """{status, ...data, social: {...}} as returned by the membership API."""
    return {"status": status, **data, "social": dict(MEMBERSHIP_ATTRIBUTION)}


def broadcast_json(status: str, *, http_status: int = 200, **data: Any) -> web.Response:
    return web.json_response(broadcast_envelope(status, **data), status=http_status)


def membership_json(status: str, *, http_status: int = 200, **data: Any) -> web.Response:
    return web.json_response(membership_envelope(status, **data), status=http_status)
