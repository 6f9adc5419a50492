"""Per-bucket changes between two snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from boltwatch.models import Snapshot, format_bytes


@dataclass
class Delta:
    """The change of one bucket between two snapshots."""

    bucket: str
    keys_diff: int = 0
    size_diff: int = 0


def compute_deltas(prev: Snapshot | None, curr: Snapshot | None) -> list[Delta]:
    """Return deltas for buckets that were added, removed or changed."""
    if prev is None or curr is None:
        return []

    deltas: list[Delta] = []
    for name, cs in curr.buckets.items():
        ps = prev.buckets.get(name)
        if ps is None:
            deltas.append(Delta(name, cs.key_count, cs.size))
            continue
        keys_diff = cs.key_count - ps.key_count
        size_diff = cs.size - ps.size
        if keys_diff or size_diff:
            deltas.append(Delta(name, keys_diff, size_diff))

    deltas.extend(
        Delta(name, -ps.key_count, -ps.size)
        for name, ps in prev.buckets.items()
        if name not in curr.buckets
    )
    return deltas


def has_changes(deltas: Sequence[Delta] | None) -> bool:
    """True if any deltas are present."""
    return bool(deltas)


def format_deltas(deltas: Sequence[Delta] | None) -> str:
    """Render deltas as a table of key and size differences."""
    if not deltas:
        return "no changes detected"

    lines = [
        f"{'BUCKET':<24} {'KEYS DIFF':>10} {'SIZE DIFF':>12}\n",
        "-" * 50 + "\n",
    ]
    for d in deltas:
        key_sign = "" if d.keys_diff < 0 else "+"
        size_sign = "" if d.size_diff < 0 else "+"
        lines.append(
            f"{d.bucket:<24} {key_sign}{d.keys_diff:9d} "
            f"{size_sign}{format_bytes(d.size_diff):>11}\n"
        )
    return "".join(lines)


def format_delta_bytes(b: int) -> str:
    """Format a possibly negative byte count."""
    if b < 0:
        return "-" + format_bytes(-b)
    return format_bytes(b)