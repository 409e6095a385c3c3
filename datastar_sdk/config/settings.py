"""Pydantic Settings — typed configuration with .env auto-loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SDK and demo service configuration loaded from environment / .env file.

    Every field can be overridden with a ``DATASTAR_`` prefixed variable,
    e.g. ``DATASTAR_SERVICE_PORT=8000``.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATASTAR_",
        env_file=".env",
        extra="ignore",
    )

    # ── Service ──────────────────────────────────────────────
    service_host: str = "127.0.0.1"
    service_port: int = 3000
    debug: bool = False
    log_level: str = "INFO"

    # ── Demo pages ───────────────────────────────────────────
    client_bundle_url: str = (
        "https://cdn.jsdelivr.net/gh/starfederation/datastar@1.0.0-RC.6/bundles/datastar.js"
    )
    demo_delay_seconds: float = 5.0


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor for application settings."""
    return Settings()
