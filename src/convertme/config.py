from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from convertme.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class Settings:
    strict: bool
    log_level: str

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper())


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def strict_enabled() -> bool:
    return _env_flag("CONVERTME_STRICT")


def parse_log_level(value: str, source: str = "CONVERTME_LOG_LEVEL") -> str:
    """Normalize a log level name, raising ConfigurationError if it is unknown."""
    log_level = value.strip().lower()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"{source} must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
        )
    return log_level


def get_settings() -> Settings:
    return Settings(
        strict=strict_enabled(),
        log_level=parse_log_level(os.getenv("CONVERTME_LOG_LEVEL", "warning")),
    )
