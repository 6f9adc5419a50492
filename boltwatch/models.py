"""Core data types shared by the snapshot analysis modules."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class BucketStats:
    """Statistics for a single bucket."""

    name: str = ""
    key_count: int = 0
    size: int = 0
    depth: int = 0

    def __str__(self) -> str:
        quoted = json.dumps(self.name, ensure_ascii=False)
        return (
            f"bucket={quoted} keys={self.key_count} "
            f"size={format_bytes(self.size)} depth={self.depth}"
        )


@dataclass
class Snapshot:
    """A point-in-time collection of bucket statistics keyed by bucket name."""

    buckets: dict[str, BucketStats] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_now)

    def is_empty(self) -> bool:
        return not self.buckets

    def total_keys(self) -> int:
        return total_keys(self.buckets.values())

    def total_size(self) -> int:
        return total_size(self.buckets.values())


def format_bytes(n: int) -> str:
    """Render a byte count as a human-readable string."""
    if n >= _GB:
        return f"{n / _GB:.2f} GB"
    if n >= _MB:
        return f"{n / _MB:.2f} MB"
    if n >= _KB:
        return f"{n / _KB:.2f} KB"
    return f"{n} B"


def total_keys(stats: Iterable[BucketStats]) -> int:
    """Sum of key counts across the given stats."""
    return sum(s.key_count for s in stats)


def total_size(stats: Iterable[BucketStats]) -> int:
    """Sum of sizes across the given stats."""
    return sum(s.size for s in stats)