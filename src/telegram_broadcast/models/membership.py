"""MembershipResult: a user's standing in a group or channel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MEMBER_STATUSES = frozenset({"creator", "administrator", "member"})
ADMIN_STATUSES = frozenset({"creator", "administrator"})


@dataclass(frozen=True, slots=True)
class ChatInfo:
    username: str
    title: str | None
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"username": self.username, "title": self.title, "type": self.type}


@dataclass(frozen=True, slots=True)
class MembershipResult:
    """Membership flags derived from Telegram's chat member status.

    'restricted', 'left' and 'kicked' count as neither member nor admin.
    """

    user_status: str
    chat: ChatInfo

    @property
    def is_member(self) -> bool:
        return self.user_status in MEMBER_STATUSES

    @property
    def is_admin(self) -> bool:
        return self.user_status in ADMIN_STATUSES

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_member": self.is_member,
            "is_admin": self.is_admin,
            "user_status": self.user_status,
            "chat": self.chat.to_dict(),
        }
