"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from balance_engine.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    model: str = "gpt-4o-mini"
    max_tokens: int = 2000
    lookback_days: int = 30
    max_results: int = 100
    log_level: str = "INFO"
    google_access_token: Optional[str] = None
    google_account_email: Optional[str] = None
    google_client_secrets_file: Optional[str] = None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got '{raw}'") from exc


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from the process environment and an optional .env file."""

    load_dotenv(env_file, override=False)

    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        model=os.getenv("BALANCE_MODEL") or Settings.model,
        max_tokens=_int_env("BALANCE_MAX_TOKENS", Settings.max_tokens),
        lookback_days=_int_env("BALANCE_LOOKBACK_DAYS", Settings.lookback_days),
        max_results=_int_env("BALANCE_MAX_RESULTS", Settings.max_results),
        log_level=os.getenv("BALANCE_LOG_LEVEL") or Settings.log_level,
        google_access_token=os.getenv("GOOGLE_ACCESS_TOKEN") or None,
        google_account_email=os.getenv("GOOGLE_ACCOUNT_EMAIL") or None,
        google_client_secrets_file=os.getenv("GOOGLE_CLIENT_SECRETS_FILE") or None,
    )
