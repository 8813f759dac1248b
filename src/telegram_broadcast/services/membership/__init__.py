"""Group/channel membership check."""

from telegram_broadcast.services.membership.membership_service import MembershipService

__all__ = ["MembershipService"]
