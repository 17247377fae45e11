"""
Runtime settings, read from environment variables.

    REASONING_HISTORY_PATH        JSON file for the history snapshot (unset = in memory)
    REASONING_HISTORY_CAPACITY    How many past interactions to keep (default 10)
    REASONING_SIMULATED_DELAY_MS  Artificial latency before classification (default 0)
    REASONING_LOG_LEVEL           Root logging level (default INFO)

Bad values are logged and replaced by the default; start-up never fails
because of configuration.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 10
DEFAULT_SIMULATED_DELAY_MS = 0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    history_path: str | None = None
    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    simulated_delay_ms: int = DEFAULT_SIMULATED_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d, using %d", name, value, minimum, default)
        return default
    return value


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    history_path = os.getenv("REASONING_HISTORY_PATH") or None
    log_level = (os.getenv("REASONING_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if log_level not in logging.getLevelNamesMapping():
        logger.warning("REASONING_LOG_LEVEL=%r is not a logging level, using %s", log_level, DEFAULT_LOG_LEVEL)
        log_level = DEFAULT_LOG_LEVEL

    return Settings(
        history_path=history_path,
        history_capacity=_int_env("REASONING_HISTORY_CAPACITY", DEFAULT_HISTORY_CAPACITY, 1),
        simulated_delay_ms=_int_env("REASONING_SIMULATED_DELAY_MS", DEFAULT_SIMULATED_DELAY_MS, 0),
        log_level=log_level,
    )
