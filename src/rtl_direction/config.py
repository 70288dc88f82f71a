"""Application configuration via environment variables with RTL_ prefix."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """RTL direction service configuration.

    All settings are read from environment variables prefixed with ``RTL_``.
    """

    model_config = SettingsConfigDict(env_prefix="RTL_")

    # ── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # ── Locale Detection ────────────────────────────────────────────────────
    # Checked in order before LANGUAGE and the interpreter locale
    locale_env_vars: list[str] = Field(default=["LC_ALL", "LC_MESSAGES", "LANG"])
    # Last resort when no ambient source yields a locale
    default_locale: str = ""

    # ── API ─────────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
