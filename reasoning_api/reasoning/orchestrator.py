"""
Orchestrator

Runs one request/response cycle:

  1. Reject empty or whitespace-only input (EmptyInputError)
  2. Classify the raw input
  3. Synthesize a templated response from the classification
  4. Scan the synthesized response (not the user's input) for bias
  5. If anything was found, rewrite the response and record the substitutions
  6. Prepend the interaction to the bounded history and persist the snapshot

Only step 1 can fail. The history list is owned here; the store only
receives full snapshots to persist.
"""

import logging
import random
import time
from datetime import datetime, timezone
from typing import Callable

from reasoning_api.config import DEFAULT_HISTORY_CAPACITY
from reasoning_api.errors import EmptyInputError
from reasoning_api.models.schemas import AnalysisResult, HistoryItem, InputAnalysis
from reasoning_api.reasoning.bias_filter import detect_bias, suggest_improvements
from reasoning_api.reasoning.classifier import classify
from reasoning_api.reasoning.synthesizer import synthesize
from reasoning_api.store import HistoryStore, InMemoryHistoryStore

logger = logging.getLogger(__name__)

Synthesizer = Callable[[str, InputAnalysis], str]


class Orchestrator:
    """
    Chains classifier, synthesizer and bias filter, and owns the history.

    Args:
        store: Where history snapshots are loaded from and saved to.
            Defaults to an in-memory store.
        capacity: Maximum number of history items kept (default 10).
        rng: Random source for the classifier's context fallback.
        synthesizer: Builds the draft response from (input, analysis).
        simulated_delay_ms: Artificial latency before classification.
        clock: Returns the timestamp recorded on each history item.
    """

    def __init__(
        self,
        store: HistoryStore | None = None,
        capacity: int = DEFAULT_HISTORY_CAPACITY,
        rng: random.Random | None = None,
        synthesizer: Synthesizer = synthesize,
        simulated_delay_ms: int = 0,
        clock: Callable[[], datetime] | None = None,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")

        self.store = store if store is not None else InMemoryHistoryStore()
        self.capacity = capacity
        self.rng = rng
        self.synthesizer = synthesizer
        self.simulated_delay_ms = simulated_delay_ms
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self._history: list[HistoryItem] = self.store.load()[:capacity]

    @property
    def history(self) -> list[HistoryItem]:
        """Past interactions, most recent first (a copy)."""
        return list(self._history)

    def process(self, raw_input: str) -> AnalysisResult:
        if not raw_input.strip():
            raise EmptyInputError()

        if self.simulated_delay_ms > 0:
            time.sleep(self.simulated_delay_ms / 1000)

        analysis = classify(raw_input, self.rng)
        draft = self.synthesizer(raw_input, analysis)
        bias_analysis = detect_bias(draft)

        if bias_analysis.bias_score > 0:
            response, suggestions = suggest_improvements(draft)
        else:
            response, suggestions = draft, ()

        result = AnalysisResult(
            response=response,
            analysis=analysis,
            bias_analysis=bias_analysis,
            suggestions=suggestions,
        )

        item = HistoryItem(
            input=raw_input,
            response=response,
            analysis=analysis,
            bias_analysis=bias_analysis,
            timestamp=self.clock(),
        )
        self._history = [item, *self._history][: self.capacity]
        self.store.save(self.history)

        logger.info(
            "Processed input: category=%s complexity=%s reasoning=%s bias_score=%d suggestions=%d",
            analysis.category.value,
            analysis.complexity.value,
            analysis.reasoning_type.value,
            bias_analysis.bias_score,
            len(suggestions),
        )
        return result

    def clear_history(self) -> int:
        """Empty the history and remove the stored snapshot. Returns items removed."""
        removed = len(self._history)
        self._history = []
        self.store.clear()
        logger.info("History cleared (%d item(s) removed)", removed)
        return removed
