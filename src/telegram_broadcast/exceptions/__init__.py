"""Exceptions subpackage."""

from telegram_broadcast.exceptions.exceptions import (
    BroadcastAPIError,
    CredentialVerificationError,
    MembershipCheckError,
    RequestValidationError,
    TelegramServiceError,
)

__all__ = [
    "BroadcastAPIError",
    "CredentialVerificationError",
    "MembershipCheckError",
    "RequestValidationError",
    "TelegramServiceError",
]
