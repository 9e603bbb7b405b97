"""pipepath runtime settings.

All settings are backed by environment variables following the PP_* naming
convention. Values are read once, when this module is imported.

Example:
    >>> from pipepath.config import settings
    >>> settings.platform
    'auto'

Environment Variables:
    PP_PLATFORM: Platform adapter to use: auto, windows or posix (default: auto)
    PP_LOG_LEVEL: Level for pipepath loggers (default: WARNING; unknown names fall back to it)
    PP_LOG_JSON: Emit JSON-lines log records (default: false)
    PP_LOG_REDACT: Redact home directories in log output (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

PLATFORM_CHOICES = ("auto", "windows", "posix")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: str) -> str:
    """Get environment variable with PP_* prefix validation."""
    if not name.startswith("PP_"):
        raise ValueError(f"Only PP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


def _env_level(name: str, default: str) -> str:
    """Get a logging level name; unknown names fall back to ``default``."""
    raw = _env(name, default).strip().upper()
    return raw if raw in LOG_LEVELS else default


@dataclass(frozen=True)
class Settings:
    """Runtime settings for pipepath.

    Frozen to prevent mutation at runtime. For tests, construct a new
    ``Settings`` or monkeypatch the module-level ``settings`` instance.
    """

    platform: str = _env_choice("PP_PLATFORM", "auto", PLATFORM_CHOICES)
    log_level: str = _env_level("PP_LOG_LEVEL", "WARNING")
    log_json: bool = _env_bool("PP_LOG_JSON", False)
    log_redact: bool = _env_bool("PP_LOG_REDACT", True)


settings = Settings()

__all__ = ["settings", "Settings", "PLATFORM_CHOICES", "LOG_LEVELS"]
