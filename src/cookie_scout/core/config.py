"""Runtime settings — optional environment overrides, no config file."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

DEFAULT_TIMEOUT = 30.0

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL


def _get_timeout() -> float:
    raw = os.environ.get("COOKIE_SCOUT_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def _get_log_level() -> str:
    raw = os.environ.get("COOKIE_SCOUT_LOG_LEVEL", "").strip().upper()
    return raw if raw in _LOG_LEVELS else DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Build settings: COOKIE_SCOUT_* env vars → built-in defaults."""
    return Settings(
        timeout=_get_timeout(),
        user_agent=os.environ.get("COOKIE_SCOUT_USER_AGENT") or DEFAULT_USER_AGENT,
        log_level=_get_log_level(),
    )
