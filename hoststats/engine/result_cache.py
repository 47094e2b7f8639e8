from __future__ import annotations

from collections import deque

from hoststats.models.snapshot import Snapshot

MAX_RESULT_CACHE = 100


class ResultCache:
    """Bounded FIFO history of snapshots, oldest evicted first."""

    def __init__(self, capacity: int = MAX_RESULT_CACHE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._results: deque[Snapshot] = deque(maxlen=capacity)

    def record(self, snapshot: Snapshot) -> None:
        self._results.append(snapshot)

    def history(self) -> tuple[Snapshot, ...]:
        return tuple(self._results)

    @property
    def latest(self) -> Snapshot | None:
        return self._results[-1] if self._results else None

    def clear(self) -> None:
        self._results.clear()

    def __len__(self) -> int:
        return len(self._results)
