"""Size labels for buckets."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from boltwatch.models import BucketStats, Snapshot, format_bytes


@dataclass
class LabelConfig:
    """Thresholds for assigning labels to buckets."""

    large_key_count: int = 10000
    medium_key_count: int = 1000
    large_size_bytes: int = 10 * 1024 * 1024
    medium_size_bytes: int = 1 * 1024 * 1024


def default_label_config() -> LabelConfig:
    """The default label thresholds."""
    return LabelConfig()


class BucketLabel(str, Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"
    EMPTY = "empty"


@dataclass
class LabeledBucket:
    """A bucket name with its label and stats."""

    name: str
    label: BucketLabel
    stats: BucketStats = field(default_factory=BucketStats)


def _classify(bs: BucketStats, cfg: LabelConfig) -> BucketLabel:
    if bs.key_count == 0:
        return BucketLabel.EMPTY
    if bs.key_count >= cfg.large_key_count or bs.size >= cfg.large_size_bytes:
        return BucketLabel.LARGE
    if bs.key_count >= cfg.medium_key_count or bs.size >= cfg.medium_size_bytes:
        return BucketLabel.MEDIUM
    return BucketLabel.SMALL


def label_snapshot(snap: Snapshot | None, cfg: LabelConfig) -> list[LabeledBucket]:
    """Label every bucket of a snapshot."""
    if snap is None or snap.is_empty():
        return []
    return [
        LabeledBucket(name=name, label=_classify(bs, cfg), stats=bs)
        for name, bs in snap.buckets.items()
    ]


def format_labels(labeled: Sequence[LabeledBucket] | None) -> str:
    """Table of labeled buckets sorted by name."""
    if not labeled:
        return "No buckets to display.\n"
    lines = [
        f"{'Bucket':<30} {'Label':<10} {'Keys':>10} {'Size':>12}\n",
        "-" * 66 + "\n",
    ]
    for lb in sorted(labeled, key=lambda b: b.name):
        lines.append(
            f"{lb.name:<30} {lb.label.value:<10} {lb.stats.key_count:>10} "
            f"{format_bytes(lb.stats.size):>12}\n"
        )
    return "".join(lines)


def label_summary(labeled: Sequence[LabeledBucket] | None) -> dict[BucketLabel, int]:
    """Number of buckets per label."""
    return dict(Counter(lb.label for lb in labeled or ()))


def format_label_summary(labeled: Sequence[LabeledBucket] | None) -> str:
    """One-line count of buckets per label."""
    if not labeled:
        return "No buckets.\n"
    summary = label_summary(labeled)
    return (
        f"large={summary.get(BucketLabel.LARGE, 0)}  "
        f"medium={summary.get(BucketLabel.MEDIUM, 0)}  "
        f"small={summary.get(BucketLabel.SMALL, 0)}  "
        f"empty={summary.get(BucketLabel.EMPTY, 0)}\n"
    )