"""Set-style diff of bucket names between two snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field

from boltwatch.models import Snapshot


@dataclass
class DiffResult:
    """Bucket names grouped by how they differ between two snapshots."""

    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    changed: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


def diff_snapshots(before: Snapshot | None, after: Snapshot | None) -> DiffResult:
    """Classify buckets as added, removed, changed or unchanged."""
    result = DiffResult()
    if before is None and after is None:
        return result
    if before is None:
        result.added.extend(after.buckets)
        return result
    if after is None:
        result.removed.extend(before.buckets)
        return result

    for name, after_stats in after.buckets.items():
        before_stats = before.buckets.get(name)
        if before_stats is None:
            result.added.append(name)
        elif (before_stats.key_count, before_stats.size) != (
            after_stats.key_count,
            after_stats.size,
        ):
            result.changed.append(name)
        else:
            result.unchanged.append(name)

    result.removed.extend(name for name in before.buckets if name not in after.buckets)
    return result


def format_diff(d: DiffResult | None) -> str:
    """Human-readable list of differences."""
    if d is None or d.is_empty():
        return "No differences found."
    lines = [f"  + {name} (added)\n" for name in d.added]
    lines += [f"  - {name} (removed)\n" for name in d.removed]
    lines += [f"  ~ {name} (changed)\n" for name in d.changed]
    return "".join(lines)


def format_diff_summary(d: DiffResult | None) -> str:
    """Compact one-line summary of a diff."""
    if d is None or d.is_empty():
        return "buckets: no changes"
    parts = [
        f"{len(names)} {word}"
        for names, word in ((d.added, "added"), (d.removed, "removed"), (d.changed, "changed"))
        if names
    ]
    return "buckets: " + ", ".join(parts)


def format_diff_table(d: DiffResult | None) -> str:
    """Table listing every bucket with its change status."""
    if d is None or d.is_empty():
        return "No bucket differences detected.\n"
    lines = [f"{'BUCKET':<30} STATUS\n", "-" * 42 + "\n"]
    for names, status in (
        (d.added, "ADDED"),
        (d.removed, "REMOVED"),
        (d.changed, "CHANGED"),
        (d.unchanged, "UNCHANGED"),
    ):
        lines.extend(f"{name:<30} {status}\n" for name in names)
    return "".join(lines)