"""portfolio_qa.config

Centralized configuration for the question service.

Uses environment variables (optionally from .env, see env_loader).
"""

from __future__ import annotations
from dataclasses import dataclass
import os

from portfolio_qa.errors import ConfigError

STORAGE_BACKENDS = ("memory", "sqlite")


def _env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = _env(name, default) or default
    return tuple(p.strip() for p in raw.split(",") if p.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Storage
    storage_backend: str  # memory|sqlite
    sqlite_path: str
    catalog_path: str | None  # None -> built-in catalog

    # HTTP
    api_prefix: str
    cors_origins: tuple[str, ...]

    # UI defaults
    default_debug: bool
    suggested_questions: int

    # Logging
    log_dir: str
    log_level: str

    @staticmethod
    def load() -> "Settings":
        backend = (_env("STORAGE_BACKEND", "memory") or "memory").strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ConfigError(f"STORAGE_BACKEND must be one of {STORAGE_BACKENDS}, got {backend!r}")

        prefix = (_env("API_PREFIX", "/api") or "").strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = "/" + prefix

        return Settings(
            storage_backend=backend,
            sqlite_path=_env("SQLITE_PATH", "data/portfolio_qa.db") or "data/portfolio_qa.db",
            catalog_path=_env("CATALOG_PATH") or None,
            api_prefix=prefix,
            cors_origins=_env_list("CORS_ORIGINS", "*"),
            default_debug=_env_bool("UI_DEFAULT_DEBUG", False),
            suggested_questions=_env_int("UI_SUGGESTED_QUESTIONS", 6),
            log_dir=_env("LOG_DIR", "logs") or "logs",
            log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        )
