"""Combining two snapshots into one."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from boltwatch.models import BucketStats, Snapshot


class MergeStrategy(IntEnum):
    """How a bucket present in both snapshots is resolved."""

    PREFER_A = 0
    PREFER_B = 1
    SUM_KEYS = 2


@dataclass
class MergeResult:
    """The merged snapshot and the names of buckets found in both inputs."""

    snapshot: Snapshot
    conflicts: list[str] = field(default_factory=list)


def merge_snapshots(
    a: Snapshot | None, b: Snapshot | None, strategy: MergeStrategy
) -> MergeResult | None:
    """Merge two snapshots; buckets found in only one are always kept."""
    if a is None and b is None:
        return None
    if a is None:
        return MergeResult(snapshot=b)
    if b is None:
        return MergeResult(snapshot=a)

    merged: dict[str, BucketStats] = dict(a.buckets)
    conflicts: list[str] = []

    for name, stat_b in b.buckets.items():
        stat_a = merged.get(name)
        if stat_a is None:
            merged[name] = stat_b
            continue
        conflicts.append(name)
        if strategy == MergeStrategy.PREFER_B:
            merged[name] = stat_b
        elif strategy == MergeStrategy.SUM_KEYS:
            merged[name] = BucketStats(
                name=stat_a.name,
                key_count=stat_a.key_count + stat_b.key_count,
                size=stat_a.size + stat_b.size,
            )

    timestamp = max(a.timestamp, b.timestamp)
    return MergeResult(
        snapshot=Snapshot(buckets=merged, timestamp=timestamp),
        conflicts=conflicts,
    )