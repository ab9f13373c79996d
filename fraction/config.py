from __future__ import annotations
import logging
import os
from typing import Optional

from fraction.errors import FractionConfigError


# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_max_depth() -> Optional[int]:
    """Evaluation depth limit from FRACTION_MAX_DEPTH, or None for host-only."""
    raw = value_from_env('FRACTION_MAX_DEPTH')
    if raw is None:
        return None
    try:
        depth = int(raw)
    except ValueError:
        raise FractionConfigError(f"FRACTION_MAX_DEPTH must be an integer, got {raw!r}") from None
    if depth <= 0:
        raise FractionConfigError(f"FRACTION_MAX_DEPTH must be positive, got {depth}")
    return depth


def get_log_level() -> int:
    raw = value_from_env('FRACTION_LOG_LEVEL', _DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise FractionConfigError(f"FRACTION_LOG_LEVEL is not a logging level: {raw!r}")
    return level


def configure_logging() -> logging.Logger:
    """Apply FRACTION_LOG_LEVEL to the package logger and return it."""
    logger = logging.getLogger('fraction')
    logger.setLevel(get_log_level())
    return logger
