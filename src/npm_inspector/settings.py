"""Environment-driven settings for the inspector CLI.

Recognised variables:

- ``NPM_INSPECTOR_LOG_LEVEL``: logging level name for diagnostics (default WARNING)
- ``NPM_INSPECTOR_COLOR``: force colour on or off with a boolean word
- ``NO_COLOR``: any non-empty value disables colour
- ``NPM_INSPECTOR_FALLBACK_COLUMNS``: width used when the terminal size is unknown
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .report import DEFAULT_COLUMNS


LOG_LEVEL_ENV_VAR = "NPM_INSPECTOR_LOG_LEVEL"
COLOR_ENV_VAR = "NPM_INSPECTOR_COLOR"
NO_COLOR_ENV_VAR = "NO_COLOR"
FALLBACK_COLUMNS_ENV_VAR = "NPM_INSPECTOR_FALLBACK_COLUMNS"

_TRUE = {"1", "true", "yes", "y"}
_FALSE = {"0", "false", "no", "n"}
DEFAULT_LOG_LEVEL = "WARNING"
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigError(RuntimeError):
    """Raised when an environment setting holds an invalid value."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True
    fallback_columns: int = DEFAULT_COLUMNS

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LEVELS:
        known = ", ".join(sorted(_LEVELS))
        raise ConfigError(f"Invalid {LOG_LEVEL_ENV_VAR} '{raw}'. Expected one of: {known}")
    return level


def _parse_color(env: Mapping[str, str]) -> bool:
    raw = env.get(COLOR_ENV_VAR, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    if raw:
        raise ConfigError(f"Invalid {COLOR_ENV_VAR} '{raw}' (must be a boolean word)")
    return not env.get(NO_COLOR_ENV_VAR)


def _parse_columns(raw: str) -> int:
    try:
        columns = int(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid {FALLBACK_COLUMNS_ENV_VAR} '{raw}' (must be an integer)") from exc
    if columns <= 0:
        raise ConfigError(f"{FALLBACK_COLUMNS_ENV_VAR} must be positive, got {columns}")
    return columns


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigError: If any recognised variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    log_level = DEFAULT_LOG_LEVEL
    raw_level = env.get(LOG_LEVEL_ENV_VAR)
    if raw_level:
        log_level = _parse_log_level(raw_level)

    fallback_columns = DEFAULT_COLUMNS
    raw_columns = env.get(FALLBACK_COLUMNS_ENV_VAR)
    if raw_columns:
        fallback_columns = _parse_columns(raw_columns)

    return Settings(
        log_level=log_level,
        color=_parse_color(env),
        fallback_columns=fallback_columns,
    )
