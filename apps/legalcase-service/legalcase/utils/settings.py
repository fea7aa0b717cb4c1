"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


DEFAULT_DATABASE_URL = "sqlite:///legalcase.db"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "INFO"
    argon2_time_cost: int = 2
    argon2_memory_cost: int = 102400
    argon2_parallelism: int = 8


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings built from ``LEGALCASE_*`` variables."""
    return Settings(
        database_url=os.getenv("LEGALCASE_DATABASE_URL") or DEFAULT_DATABASE_URL,
        sql_echo=_normalize_bool(os.getenv("LEGALCASE_SQL_ECHO"), default=False),
        log_level=(os.getenv("LEGALCASE_LOG_LEVEL") or "INFO").upper(),
        argon2_time_cost=_int_env("LEGALCASE_ARGON2_TIME_COST", 2),
        argon2_memory_cost=_int_env("LEGALCASE_ARGON2_MEMORY_COST", 102400),
        argon2_parallelism=_int_env("LEGALCASE_ARGON2_PARALLELISM", 8),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
