"""Read request parameters from the query string (GET) or body (POST)."""

from __future__ import annotations

import json
from typing import Any

from aiohttp import web

from telegram_broadcast.exceptions import RequestValidationError


async def read_params(request: web.Request) -> dict[str, Any]:
    """Return GET query parameters, or the POST body (JSON object or form fields).

    Raises:
        RequestValidationError: POST body is not valid JSON or not a JSON object.
    """
    if request.method != "POST":
        return dict(request.query)

    if request.content_type in ("application/x-www-form-urlencoded", "multipart/form-data"):
        form = await request.post()
        return {k: v for k, v in form.items() if isinstance(v, str)}

    if not request.can_read_body:
        return dict(request.query)

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RequestValidationError("Invalid JSON body.", code="INVALID_JSON") from exc
    if not isinstance(body, dict):
        raise RequestValidationError("Invalid JSON body.", code="INVALID_JSON")
    return body
