"""Calculation history management."""

import itertools
import logging
import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Deque, List, Optional


logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


@dataclass(frozen=True)
class HistoryEntry:
    """A single completed calculation."""

    id: int
    expression: str
    result: float
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "expression": self.expression,
            "result": self.result,
            "timestamp": self.timestamp.isoformat(),
        }


class CalculationHistory:
    """Bounded, chronological log of calculations.

    The oldest entry is evicted once capacity is reached. Ids keep
    increasing across evictions and clears. All methods are serialized
    on an internal lock.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._entries: Deque[HistoryEntry] = deque(maxlen=capacity)
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, expression: str, result: float) -> HistoryEntry:
        """Record a calculation, evicting the oldest entry when full."""
        with self._lock:
            entry = HistoryEntry(
                id=next(self._ids),
                expression=expression,
                result=result,
                timestamp=datetime.now(timezone.utc),
            )
            if len(self._entries) == self._capacity:
                logger.debug("Evicting history entry %d", self._entries[0].id)
            self._entries.append(entry)
            return entry

    def get_all(self) -> List[HistoryEntry]:
        """Return a copy of all entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def get_last(self, count: int = 10) -> List[HistoryEntry]:
        """Get the last N calculations, oldest first."""
        if count <= 0:
            return []
        with self._lock:
            return list(self._entries)[-count:]

    def search(self, term: str) -> List[HistoryEntry]:
        """Search history for expressions containing term."""
        with self._lock:
            return [e for e in self._entries if term in e.expression]

    def get_by_id(self, entry_id: int) -> Optional[HistoryEntry]:
        """Get a specific calculation by id, if still retained."""
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    def clear(self) -> None:
        """Clear all history. Ids are not reused afterwards."""
        with self._lock:
            logger.debug("Clearing %d history entries", len(self._entries))
            self._entries.clear()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        """Return current history size."""
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size
