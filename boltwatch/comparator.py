"""Structured comparison of two snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field

from boltwatch.models import Snapshot


@dataclass
class BucketComparison:
    """Comparison of one bucket between snapshots A and B."""

    bucket: str
    keys_a: int = 0
    keys_b: int = 0
    size_a: int = 0
    size_b: int = 0
    keys_diff: int = 0
    size_diff: int = 0
    is_new: bool = False
    is_removed: bool = False


@dataclass
class CompareResult:
    """All bucket comparisons between two snapshots, with counts."""

    comparisons: list[BucketComparison] = field(default_factory=list)
    added_count: int = 0
    removed_count: int = 0
    changed_count: int = 0


def compare_snapshots(a: Snapshot | None, b: Snapshot | None) -> CompareResult:
    """Compare two snapshots; an empty result if either is missing."""
    if a is None or b is None:
        return CompareResult()

    comparisons: list[BucketComparison] = []
    for name, bs_b in b.buckets.items():
        comp = BucketComparison(bucket=name, keys_b=bs_b.key_count, size_b=bs_b.size)
        bs_a = a.buckets.get(name)
        if bs_a is not None:
            comp.keys_a = bs_a.key_count
            comp.size_a = bs_a.size
            comp.keys_diff = bs_b.key_count - bs_a.key_count
            comp.size_diff = bs_b.size - bs_a.size
        else:
            comp.is_new = True
            comp.keys_diff = bs_b.key_count
            comp.size_diff = bs_b.size
        comparisons.append(comp)

    comparisons.extend(
        BucketComparison(
            bucket=name,
            keys_a=bs_a.key_count,
            size_a=bs_a.size,
            keys_diff=-bs_a.key_count,
            size_diff=-bs_a.size,
            is_removed=True,
        )
        for name, bs_a in a.buckets.items()
        if name not in b.buckets
    )
    comparisons.sort(key=lambda c: c.bucket)

    result = CompareResult(comparisons=comparisons)
    for c in comparisons:
        if c.is_new:
            result.added_count += 1
        elif c.is_removed:
            result.removed_count += 1
        elif c.keys_diff or c.size_diff:
            result.changed_count += 1
    return result