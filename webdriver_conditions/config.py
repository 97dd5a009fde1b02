"""Default timeouts and environment-driven settings."""

import logging
import os

from .exceptions import ConfigurationError


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def _level_from_env(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip() or default
    level = raw.upper()
    # getLevelName maps known names to ints, anything else to a "Level x" string
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{name} must be a logging level name, got {raw!r}")
    return level


# WebDriver wait timeouts (seconds)
TIMEOUT_DEFAULT = _float_from_env("WDCOND_TIMEOUT", 3.0)
POLL_FREQUENCY = _float_from_env("WDCOND_POLL_FREQUENCY", 0.2)

LOG_LEVEL = _level_from_env("WDCOND_LOG_LEVEL", "WARNING")

# Remote grid for the live integration tests
SELENIUM_URL = os.environ.get("SELENIUM_URL", "http://localhost:4444/wd/hub")
