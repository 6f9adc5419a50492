"""Human-readable notes about buckets that approach or exceed limits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from boltwatch.alert import AlertConfig
from boltwatch.models import Snapshot, format_bytes


@dataclass
class Annotation:
    """A note attached to a bucket; level is "info", "warn" or "critical"."""

    bucket: str
    level: str
    message: str


def annotate_snapshot(s: Snapshot | None, cfg: AlertConfig) -> list[Annotation]:
    """Annotate buckets against the limits; critical thresholds act as limits
    and zero thresholds are ignored."""
    if s is None or s.is_empty():
        return []

    max_keys, warn_keys = cfg.critical_key_count, cfg.warn_key_count
    max_size, warn_size = cfg.critical_size_bytes, cfg.warn_size_bytes
    annotations: list[Annotation] = []

    for name, bs in s.buckets.items():
        if max_keys > 0 and bs.key_count >= max_keys:
            annotations.append(
                Annotation(name, "critical", f"key count {bs.key_count} exceeds limit {max_keys}")
            )
        elif warn_keys > 0 and bs.key_count >= warn_keys:
            annotations.append(
                Annotation(name, "warn", f"key count {bs.key_count} approaching limit {max_keys}")
            )

        if max_size > 0 and bs.size >= max_size:
            annotations.append(
                Annotation(
                    name,
                    "critical",
                    f"size {format_bytes(bs.size)} exceeds limit {format_bytes(max_size)}",
                )
            )
        elif warn_size > 0 and bs.size >= warn_size:
            annotations.append(
                Annotation(
                    name,
                    "warn",
                    f"size {format_bytes(bs.size)} approaching limit {format_bytes(max_size)}",
                )
            )
    return annotations


def format_annotations(annotations: Sequence[Annotation] | None) -> str:
    """One line per annotation."""
    return "".join(f"[{a.level}] {a.bucket}: {a.message}\n" for a in annotations or ())