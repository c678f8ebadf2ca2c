"""
Process configuration read from environment variables.

Required:
- SUPABASE_URL   base URL of the hosted project (auth API lives under /auth/v1)
- SUPABASE_KEY   service key sent as `apikey` to the auth API
- DATABASE_URL   Postgres DSN of the hosted database
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_key: str
    database_url: str
    jwt_secret: str | None = None
    jwt_audience: str = "authenticated"
    auth_timeout_s: float = 10.0
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_command_timeout_s: float = 30.0


def _env_str(environ: Mapping[str, str], name: str) -> str:
    return (environ.get(name) or "").strip()


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _env_str(environ, name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = _env_str(environ, name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    required = {
        "SUPABASE_URL": _env_str(env, "SUPABASE_URL"),
        "SUPABASE_KEY": _env_str(env, "SUPABASE_KEY"),
        "DATABASE_URL": _env_str(env, "DATABASE_URL"),
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    return Settings(
        supabase_url=required["SUPABASE_URL"].rstrip("/"),
        supabase_key=required["SUPABASE_KEY"],
        database_url=required["DATABASE_URL"],
        jwt_secret=_env_str(env, "SUPABASE_JWT_SECRET") or None,
        jwt_audience=_env_str(env, "SUPABASE_JWT_AUDIENCE") or "authenticated",
        auth_timeout_s=_env_float(env, "AUTH_TIMEOUT_S", 10.0),
        db_pool_min_size=_env_int(env, "DB_POOL_MIN_SIZE", 1),
        db_pool_max_size=_env_int(env, "DB_POOL_MAX_SIZE", 5),
        db_command_timeout_s=_env_float(env, "DB_COMMAND_TIMEOUT_S", 30.0),
    )


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
