"""
Process configuration read from environment variables.

A `.env` file is loaded by `main` before any of these accessors run, so
values can come from either the real environment or that file.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 10

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def port() -> int:
    value = _env_int("PORT", DEFAULT_PORT)
    return value if 0 < value < 65536 else DEFAULT_PORT


def host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST


def pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE))


def pool_max_size() -> int:
    # asyncpg rejects max_size < min_size.
    return max(1, pool_min_size(), _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE))


def database_ssl() -> bool:
    return _env_bool("DATABASE_SSL", True)


def database_ssl_verify() -> bool:
    """
    Certificate verification toward the database is off unless asked for.
    Hosted Postgres providers commonly serve certificates that do not chain
    to a public CA.
    """
    return _env_bool("DATABASE_SSL_VERIFY", False)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
