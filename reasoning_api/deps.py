"""Shared FastAPI dependencies used across route modules."""

import logging
from functools import lru_cache

from reasoning_api.config import load_settings
from reasoning_api.reasoning.orchestrator import Orchestrator
from reasoning_api.store import build_store

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_orchestrator() -> Orchestrator:
    """One orchestrator (and so one history) per process, built from the environment."""
    settings = load_settings()
    store = build_store(settings.history_path)
    logger.info(
        "History store: %s (capacity %d)",
        settings.history_path or "in memory",
        settings.history_capacity,
    )
    return Orchestrator(
        store=store,
        capacity=settings.history_capacity,
        simulated_delay_ms=settings.simulated_delay_ms,
    )
