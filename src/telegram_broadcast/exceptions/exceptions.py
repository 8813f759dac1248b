"""Custom exceptions for the broadcast and membership APIs."""

from __future__ import annotations


class BroadcastAPIError(Exception):
    """Base exception for telegram_broadcast errors."""

    pass


class RequestValidationError(BroadcastAPIError):
    """Raised when a caller request is missing or has malformed fields."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class TelegramServiceError(BroadcastAPIError):
    """Raised when a Telegram Bot API call fails.

    ``description`` is the text reported by Telegram (or the transport error)
    and is safe to pass back to the caller.
    """

    def __init__(
        self,
        description: str,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(description)
        self.description = description
        self.cause = cause


class CredentialVerificationError(TelegramServiceError):
    """Raised when Telegram rejects the bot token (getMe failed)."""


class MembershipCheckError(TelegramServiceError):
    """Raised when resolving the chat or the member status fails."""
