# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, BROADCAST__BATCH_SIZE.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "telegram-broadcast-api"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/telegram_broadcast.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ServerSettings(BaseSettings):
    """HTTP server binding (aiohttp.web)."""

    model_config = SettingsConfigDict(extra="ignore")

    host: str = Field(default="0.0.0.0", description="Interface to bind.")
    port: int = Field(default=8080, ge=1, le=65535, description="TCP port to bind.")


class TelegramSettings(BaseSettings):
    """Telegram Bot API transport (from env TELEGRAM__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    connect_timeout: float = Field(default=10.0, ge=0.1, le=60.0)
    read_timeout: float = Field(default=20.0, ge=0.1, le=120.0)
    write_timeout: float = Field(default=20.0, ge=0.1, le=120.0)
    pool_timeout: float = Field(default=10.0, ge=0.1, le=60.0)
    connection_pool_size: int = Field(
        default=32,
        ge=1,
        le=512,
        description="Concurrent HTTP connections per bot; must cover one dispatch batch.",
    )


class BroadcastSettings(BaseSettings):
    """Broadcast dispatch tuning (from env BROADCAST__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    batch_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Recipients messaged concurrently per batch.",
    )
    batch_delay_seconds: float = Field(
        default=1.0,
        ge=0.0,
        le=60.0,
        description="Cooldown between consecutive batches.",
    )
    discovery_limit: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Number of updates read from getUpdates when no webhook is set.",
    )
    failure_sample_size: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Maximum failed recipients echoed back in the report.",
    )
    default_parse_mode: str = Field(
        default="HTML",
        description="Markup mode used when the caller does not pass parse_mode.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, SERVER__PORT.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    telegram: TelegramSettings = Field(default_factory=TelegramSettings)
    broadcast: BroadcastSettings = Field(default_factory=BroadcastSettings)

    @model_validator(mode="after")
    def _pool_covers_batch(self) -> Settings:
        if self.telegram.connection_pool_size < self.broadcast.batch_size:
            raise ValueError(
                "TELEGRAM__CONNECTION_POOL_SIZE must be >= BROADCAST__BATCH_SIZE"
            )
        return self

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        from_env(broadcast={"batch_delay_seconds": 0}).

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from telegram_broadcast.config import get_settings

        settings = get_settings()
        batch_size = settings.broadcast.batch_size
    """
    return Settings()
