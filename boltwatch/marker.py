"""Named point-in-time markers attached to snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from boltwatch.delta import Delta, compute_deltas, format_deltas, has_changes
from boltwatch.models import Snapshot


class MarkerKind(str, Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    ALERT = "alert"


def _rfc3339(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.astimezone()
    base = dt.strftime("%Y-%m-%dT%H:%M:%S")
    offset = dt.utcoffset()
    if not offset:
        return base + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{base}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


@dataclass
class Marker:
    """A labelled annotation of a snapshot."""

    label: str
    kind: MarkerKind
    timestamp: datetime
    snapshot: Snapshot
    note: str = ""

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.label} @ {_rfc3339(self.timestamp)}"


class MarkerBoard:
    """A collection of markers keyed by label."""

    def __init__(self) -> None:
        self._markers: dict[str, Marker] = {}

    def add(self, label: str, snap: Snapshot | None, kind: MarkerKind, note: str = "") -> None:
        """Store a marker for a snapshot; a missing snapshot is ignored."""
        if snap is None:
            return
        self._markers[label] = Marker(
            label=label,
            kind=MarkerKind(kind),
            timestamp=snap.timestamp,
            snapshot=snap,
            note=note,
        )

    def get(self, label: str) -> Marker | None:
        return self._markers.get(label)

    def remove(self, label: str) -> None:
        self._markers.pop(label, None)

    def all(self) -> list[Marker]:
        return list(self._markers.values())

    def __len__(self) -> int:
        return len(self._markers)


def compare_to_marker(current: Snapshot | None, m: Marker | None) -> list[Delta]:
    """Deltas between a marker's snapshot and the current snapshot."""
    if m is None or current is None:
        return []
    return compute_deltas(m.snapshot, current)


def has_marker_changes(current: Snapshot | None, m: Marker | None) -> bool:
    """Whether anything changed since the marker."""
    return has_changes(compare_to_marker(current, m))


def marker_drift_summary(current: Snapshot | None, m: Marker | None) -> str:
    """Brief description of drift from a marker."""
    if m is None or current is None:
        return "unavailable"
    deltas = compare_to_marker(current, m)
    if not has_changes(deltas):
        return "no drift"
    changed = sum(1 for d in deltas if d.keys_diff or d.size_diff)
    if changed == 1:
        return "1 bucket changed"
    return f"{changed} buckets changed"


def _truncate(s: str, limit: int) -> str:
    if len(s) <= limit:
        return s
    return s[: limit - 1] + "…"


def format_marker_board(mb: MarkerBoard | None) -> str:
    """Table of markers ordered by timestamp."""
    if mb is None or len(mb) == 0:
        return "No markers recorded.\n"
    lines = [
        f"{'Label':<20} {'Kind':<12} {'Timestamp':<22} Note\n",
        "-" * 72 + "\n",
    ]
    for m in sorted(mb.all(), key=lambda marker: marker.timestamp):
        lines.append(
            f"{_truncate(m.label, 20):<20} {m.kind.value:<12} "
            f"{_rfc3339(m.timestamp):<22} {m.note}\n"
        )
    return "".join(lines)


def format_marker_diff(current: Snapshot | None, m: Marker | None) -> str:
    """Render the changes between a marker's snapshot and the current one."""
    if m is None:
        return "Marker not found.\n"
    if current is None:
        return "No current snapshot.\n"
    quoted = '"' + m.label.replace("\\", "\\\\").replace('"', '\\"') + '"'
    header = f"Diff vs marker {quoted} ({_rfc3339(m.timestamp)}):\n" + "-" * 48 + "\n"
    deltas = compute_deltas(m.snapshot, current)
    if not has_changes(deltas):
        return header + "No changes since marker.\n"
    return header + format_deltas(deltas)