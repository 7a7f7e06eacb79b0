# chronicle/store.py
from __future__ import annotations

from typing import Iterator, List, Tuple

from .config import DEFAULT_LIMITS, HistoryLimits
from .log import get_logger
from .models import HistoryEntry

logger = get_logger(__name__)


class HistoryStore:
    """
    Ordered, capacity-bounded list of history entries (insertion order = chronological order).

    Capacity is tracked explicitly so the log behaves the same as the fixed-size
    save layout: it starts at `birth_size`, grows by `grow_step`, and never passes
    `max_entries`. Entries are never removed one at a time; only `clear()` drops them.

    Readers get owned copies (view/get). Only the reconciler touches live entries,
    through scan_newest_first().
    """

    def __init__(self, limits: HistoryLimits = DEFAULT_LIMITS) -> None:
        self.limits = limits
        self._entries: List[HistoryEntry] = []
        self._capacity = 0
        self._initialised = False

    # --- Lifecycle ---

    def init(self, initial_capacity: int) -> None:
        """Start an empty log with room for `initial_capacity` entries."""
        if initial_capacity < 0:
            raise ValueError("initial_capacity must be >= 0")
        self._entries = []
        self._initialised = True
        self._capacity = min(initial_capacity, self.limits.max_entries)

    def clear(self) -> None:
        """Drop every entry and all capacity. No-op on a log that was never used."""
        if not self._initialised:
            return
        dropped = len(self._entries)
        self._entries = []
        self._initialised = False
        self._capacity = 0
        logger.debug("history_cleared", dropped=dropped)

    def ensure_capacity(self, target: int) -> bool:
        """
        Grow capacity to `target` (capped at max_entries).

        Returns False when nothing grew: either there was already room, or the
        ceiling is in the way. Callers that need exactly `target` must check.
        """
        target = min(target, self.limits.max_entries)
        if target <= self._capacity:
            return False
        self._initialised = True
        logger.debug("history_grown", old_capacity=self._capacity, new_capacity=target)
        self._capacity = target
        return True

    # --- Mutation ---

    def append(self, entry: HistoryEntry) -> bool:
        """
        Copy `entry` onto the end of the log, cutting its text to `text_width`.

        Returns False (log untouched) when the log is full at max_entries.
        """
        if not self._initialised:
            self.init(self.limits.birth_size)
        elif len(self._entries) == self._capacity and not self.ensure_capacity(
            self._capacity + self.limits.grow_step
        ):
            logger.warning("history_full", count=len(self._entries), max_entries=self.limits.max_entries)
            return False

        stored = entry.copy()
        stored.text = stored.text[: self.limits.text_width]
        self._entries.append(stored)
        return True

    def scan_newest_first(self) -> Iterator[Tuple[int, HistoryEntry]]:
        """
        Yield (index, live entry) from the most recent entry back to the oldest.
        Mutating a yielded entry changes the log; appending while iterating is not allowed.
        """
        entries = self._entries
        for i in range(len(entries) - 1, -1, -1):
            yield i, entries[i]

    # --- Queries ---

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self.count >= self.limits.max_entries

    def get(self, index: int) -> HistoryEntry:
        if index < 0 or index >= self.count:
            raise IndexError(f"History entry {index} out of range (count={self.count})")
        return self._entries[index].copy()

    def view(self) -> Tuple[HistoryEntry, ...]:
        """
        Snapshot of the log, oldest first. The snapshot is owned by the caller and
        does not follow later changes; fetch a new one after appending or reconciling.
        """
        return tuple(e.copy() for e in self._entries)

    def __len__(self) -> int:
        return self.count
