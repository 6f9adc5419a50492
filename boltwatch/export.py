"""Writing snapshots as JSON or CSV."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import TextIO

from boltwatch.models import BucketStats, Snapshot


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


@dataclass
class ExportRecord:
    """A single exportable snapshot record."""

    timestamp: datetime
    buckets: dict[str, BucketStats] = field(default_factory=dict)
    total_keys: int = 0
    total_bytes: int = 0


def _rfc3339(dt: datetime, with_fraction: bool = False) -> str:
    if dt.tzinfo is None:
        dt = dt.astimezone()
    base = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if with_fraction and dt.microsecond:
        base += f".{dt.microsecond:06d}".rstrip("0")
    offset = dt.utcoffset()
    if not offset:
        return base + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{base}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


def _bucket_json(bs: BucketStats) -> dict:
    data = asdict(bs)
    return {
        "Name": data["name"],
        "KeyCount": data["key_count"],
        "Size": data["size"],
        "Depth": data["depth"],
    }


def _export_json(w: TextIO, record: ExportRecord) -> None:
    payload = {
        "timestamp": _rfc3339(record.timestamp, with_fraction=True),
        "buckets": {name: _bucket_json(record.buckets[name]) for name in sorted(record.buckets)},
        "total_keys": record.total_keys,
        "total_bytes": record.total_bytes,
    }
    w.write(json.dumps(payload, indent=2, ensure_ascii=False))
    w.write("\n")


def _export_csv(w: TextIO, record: ExportRecord) -> None:
    writer = csv.writer(w, lineterminator="\n")
    writer.writerow(["timestamp", "bucket", "keys", "size_bytes"])
    ts = _rfc3339(record.timestamp)
    for name, bs in record.buckets.items():
        writer.writerow([ts, name, bs.key_count, bs.size])


def export_snapshot(w: TextIO, snap: Snapshot | None, export_format: ExportFormat | str) -> None:
    """Write a snapshot to a text stream in the given format."""
    if snap is None:
        raise ValueError("snapshot is nil")
    try:
        fmt = ExportFormat(export_format)
    except ValueError:
        raise ValueError(f"unsupported export format: {export_format}") from None

    record = ExportRecord(
        timestamp=snap.timestamp,
        buckets=dict(snap.buckets),
        total_keys=snap.total_keys(),
        total_bytes=snap.total_size(),
    )
    if fmt is ExportFormat.JSON:
        _export_json(w, record)
    else:
        _export_csv(w, record)