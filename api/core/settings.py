"""
Environment-driven settings.

Every value is read at call time so tests can tweak the environment with
`monkeypatch.setenv` without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 5000


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def api_host() -> str:
    return os.environ.get("API_HOST", "0.0.0.0").strip() or "0.0.0.0"


def api_port() -> int:
    return _env_int("API_PORT", DEFAULT_PORT)


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))
