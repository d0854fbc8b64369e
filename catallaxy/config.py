"""Catallaxy — Application configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class CatallaxySettings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # ── Preference engine ──────────────────────────────────────
    persist_progress: bool = True

    # ── Logging ────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: str = "console"


settings = CatallaxySettings()
