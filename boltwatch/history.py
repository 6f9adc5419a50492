"""A rolling window of bucket stat snapshots."""

from __future__ import annotations

import copy
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from boltwatch.models import BucketStats


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SnapshotEntry:
    """Bucket statistics recorded at one moment."""

    buckets: list[BucketStats] = field(default_factory=list)
    timestamp: datetime = field(default_factory=_now)


class History:
    """Thread-safe store of the most recent snapshots, oldest first."""

    def __init__(self, max_size: int = 60) -> None:
        if max_size <= 0:
            max_size = 60
        self._entries: deque[SnapshotEntry] = deque(maxlen=max_size)
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._entries.maxlen or 0

    def add(self, buckets: Iterable[BucketStats]) -> None:
        """Record a snapshot, evicting the oldest when full."""
        entry = SnapshotEntry(buckets=list(buckets))
        with self._lock:
            self._entries.append(entry)

    def latest(self) -> SnapshotEntry | None:
        """A copy of the newest snapshot, or None when empty."""
        with self._lock:
            if not self._entries:
                return None
            return copy.deepcopy(self._entries[-1])

    def all(self) -> list[SnapshotEntry]:
        """Independent copies of all snapshots in chronological order."""
        with self._lock:
            return copy.deepcopy(list(self._entries))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)