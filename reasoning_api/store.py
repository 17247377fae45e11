"""
History stores.

The orchestrator keeps its bounded history list in memory and hands the
whole list to a store after every change. Two stores are provided:

  InMemoryHistoryStore  plain Python list, lost on restart (tests, demos)
  JsonFileHistoryStore  one JSON array on disk, rewritten as a whole snapshot

A store that cannot be read behaves as if it were empty. Write failures
are logged and swallowed: losing history must never break an analysis.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from reasoning_api.models.schemas import HistoryItem

logger = logging.getLogger(__name__)

_history_adapter = TypeAdapter(list[HistoryItem])


class HistoryStore(Protocol):
    def load(self) -> list[HistoryItem]: ...

    def save(self, items: list[HistoryItem]) -> None: ...

    def clear(self) -> None: ...


class InMemoryHistoryStore:
    def __init__(self, items: list[HistoryItem] | None = None):
        self._items: list[HistoryItem] = list(items or [])

    def load(self) -> list[HistoryItem]:
        return list(self._items)

    def save(self, items: list[HistoryItem]) -> None:
        self._items = list(items)

    def clear(self) -> None:
        self._items = []


class JsonFileHistoryStore:
    """History snapshot kept as a JSON array of records in a single file.

    Each record holds input, response, analysis, bias_analysis and an
    ISO-8601 timestamp. Writes go to a temporary file in the same
    directory and are moved into place, so a crash mid-write leaves the
    previous snapshot intact.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[HistoryItem]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning("History snapshot %s unreadable (%s), starting empty", self.path, e)
            return []

        try:
            return _history_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "History snapshot %s is malformed (%d error(s)), starting empty",
                self.path,
                e.error_count(),
            )
            return []

    def save(self, items: list[HistoryItem]) -> None:
        payload = _history_adapter.dump_json(items, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.warning("Could not write history snapshot %s: %s", self.path, e)

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove history snapshot %s: %s", self.path, e)

    def __repr__(self) -> str:
        return f"JsonFileHistoryStore({str(self.path)!r})"


def build_store(history_path: str | None) -> HistoryStore:
    """Pick a store for the configured path (None means in memory)."""
    if history_path:
        return JsonFileHistoryStore(history_path)
    return InMemoryHistoryStore()
