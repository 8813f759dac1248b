"""Static attribution shown in broadcast footers and API responses."""

from __future__ import annotations

BROADCAST_API_VERSION = "v1.0.0"
MEMBERSHIP_API_VERSION = "1.3.0"

BROADCAST_ATTRIBUTION: dict[str, str] = {
    "developer": "@InayatGaming on Telegram",
    "youtube": "@InayatGaming",
    "twitter": "@inayatGaming",
    "github": "@InayatGaming",
    "version": BROADCAST_API_VERSION,
}

MEMBERSHIP_ATTRIBUTION: dict[str, str] = {
    "developer": "@Kaiiddo on Telegram",
    "youtube": "@Kaiiddo",
    "twitter": "@HelloKaiiddo",
    "github": "ProKaiiddo",
    "bsky": "kaiiddo.bsky.social",
}

NO_RECIPIENTS_WARNING = "No users found. Users must interact with bot first."
STORE_RECIPIENTS_SUGGESTION = "Store user IDs in database for better results"
