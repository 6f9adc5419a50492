"""Reference snapshots for drift detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from boltwatch.models import Snapshot


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Baseline:
    """A reference snapshot with a label and creation time."""

    snapshot: Snapshot
    label: str = ""
    created_at: datetime = field(default_factory=_now)


@dataclass
class DriftResult:
    """How one bucket has drifted from the baseline; positive values mean growth."""

    bucket: str
    key_drift: int = 0
    size_drift: int = 0
    is_new: bool = False
    is_gone: bool = False


def create_baseline(snap: Snapshot | None, label: str) -> Baseline | None:
    """Create a baseline from a snapshot, or None without one."""
    if snap is None:
        return None
    return Baseline(snapshot=snap, label=label)


def compute_drift(base: Baseline | None, current: Snapshot | None) -> list[DriftResult]:
    """Per-bucket drift of a current snapshot against a baseline."""
    if base is None or base.snapshot is None or current is None:
        return []

    base_stats = base.snapshot.buckets
    results: list[DriftResult] = []
    for name, cur in current.buckets.items():
        bst = base_stats.get(name)
        if bst is None:
            results.append(DriftResult(bucket=name, is_new=True))
        else:
            results.append(
                DriftResult(
                    bucket=name,
                    key_drift=cur.key_count - bst.key_count,
                    size_drift=cur.size - bst.size,
                )
            )

    results.extend(
        DriftResult(bucket=name, is_gone=True)
        for name in base_stats
        if name not in current.buckets
    )
    return results