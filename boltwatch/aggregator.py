"""Ranking of buckets by key count and size."""

from __future__ import annotations

from dataclasses import dataclass, field

from boltwatch.models import Snapshot, format_bytes


@dataclass
class BucketRank:
    """A bucket with the values it is ranked by."""

    bucket: str
    keys: int = 0
    size: int = 0


@dataclass
class AggregateResult:
    """Output of an aggregation pass over a snapshot."""

    top_by_keys: list[BucketRank] = field(default_factory=list)
    top_by_size: list[BucketRank] = field(default_factory=list)
    total_keys: int = 0
    total_size: int = 0
    buckets: int = 0


def aggregate(snap: Snapshot | None, top_n: int = 0) -> AggregateResult:
    """Rank buckets of a snapshot; top_n limits the rankings, 0 keeps all."""
    if snap is None or snap.is_empty():
        return AggregateResult()

    ranks = [
        BucketRank(bucket=name, keys=bs.key_count, size=bs.size)
        for name, bs in snap.buckets.items()
    ]
    by_keys = sorted(ranks, key=lambda r: r.keys, reverse=True)
    by_size = sorted(ranks, key=lambda r: r.size, reverse=True)

    if 0 < top_n < len(by_keys):
        by_keys = by_keys[:top_n]
        by_size = by_size[:top_n]

    return AggregateResult(
        top_by_keys=by_keys,
        top_by_size=by_size,
        total_keys=snap.total_keys(),
        total_size=snap.total_size(),
        buckets=len(snap.buckets),
    )


def _limited(ranks: list[BucketRank], top_n: int) -> list[BucketRank]:
    if top_n <= 0:
        return ranks
    return ranks[:top_n]


def format_aggregate(result: AggregateResult | None, top_n: int = 0) -> str:
    """Render an aggregation as a summary with top-bucket tables."""
    if result is None or result.buckets == 0:
        return "No bucket data available.\n"

    lines = [
        f"Buckets: {result.buckets} | Total Keys: {result.total_keys} | "
        f"Total Size: {format_bytes(result.total_size)}\n",
        "\nTop Buckets by Keys:\n",
        f"  {'Bucket':<30} {'Keys':>10}\n",
        "  " + "-" * 42 + "\n",
    ]
    lines.extend(
        f"  {r.bucket:<30} {r.keys:>10}\n" for r in _limited(result.top_by_keys, top_n)
    )
    lines += [
        "\nTop Buckets by Size:\n",
        f"  {'Bucket':<30} {'Size':>10}\n",
        "  " + "-" * 42 + "\n",
    ]
    lines.extend(
        f"  {r.bucket:<30} {format_bytes(r.size):>10}\n"
        for r in _limited(result.top_by_size, top_n)
    )
    return "".join(lines)