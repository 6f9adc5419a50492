"""Growth classification of buckets between two snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from boltwatch.delta import format_delta_bytes
from boltwatch.models import Snapshot


class GrowthClass(str, Enum):
    STABLE = "stable"
    GROWING = "growing"
    SHRINKING = "shrinking"
    NEW = "new"
    REMOVED = "removed"


@dataclass
class BucketClassification:
    """Growth class of one bucket with its deltas and approximate keys per second."""

    bucket: str
    growth_class: GrowthClass
    key_delta: int = 0
    size_delta: int = 0
    growth_rate: float = 0.0


def classify_growth(
    prev: Snapshot | None, curr: Snapshot | None
) -> dict[str, BucketClassification]:
    """Classify each bucket by how its key count moved between snapshots."""
    result: dict[str, BucketClassification] = {}
    if prev is None or curr is None:
        return result

    elapsed = (curr.timestamp - prev.timestamp).total_seconds()
    if elapsed <= 0:
        elapsed = 1.0

    for name, cs in curr.buckets.items():
        ps = prev.buckets.get(name)
        if ps is None:
            result[name] = BucketClassification(bucket=name, growth_class=GrowthClass.NEW)
            continue
        key_delta = cs.key_count - ps.key_count
        if key_delta > 0:
            growth_class = GrowthClass.GROWING
        elif key_delta < 0:
            growth_class = GrowthClass.SHRINKING
        else:
            growth_class = GrowthClass.STABLE
        result[name] = BucketClassification(
            bucket=name,
            growth_class=growth_class,
            key_delta=key_delta,
            size_delta=cs.size - ps.size,
            growth_rate=key_delta / elapsed,
        )

    for name in prev.buckets:
        if name not in curr.buckets:
            result[name] = BucketClassification(
                bucket=name, growth_class=GrowthClass.REMOVED
            )
    return result


_ICONS = {
    GrowthClass.GROWING: "↑",
    GrowthClass.SHRINKING: "↓",
    GrowthClass.NEW: "+",
    GrowthClass.REMOVED: "✗",
}


def _truncate(s: str, limit: int) -> str:
    if len(s) <= limit:
        return s
    return s[: limit - 1] + "…"


def format_classifications(classifications: Mapping[str, BucketClassification]) -> str:
    """Table of classifications sorted by bucket name."""
    if not classifications:
        return "No bucket classifications available."

    lines = [
        f"{'Bucket':<30} {'Class':<12} {'KeyDelta':>10} {'SizeDelta':>12} "
        f"{'GrowthRate/s':>14}\n",
        "-" * 82 + "\n",
    ]
    for name in sorted(classifications):
        c = classifications[name]
        class_str = f"{_ICONS.get(c.growth_class, '~')} {c.growth_class.value}"
        lines.append(
            f"{_truncate(name, 30):<30} {class_str:<12} {c.key_delta:+10d} "
            f"{format_delta_bytes(c.size_delta):>12} {c.growth_rate:+14.2f}\n"
        )
    return "".join(lines)