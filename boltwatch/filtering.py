"""Selecting buckets of a snapshot by name prefix and minimum values."""

from __future__ import annotations

from dataclasses import dataclass

from boltwatch.models import BucketStats, Snapshot


@dataclass
class FilterConfig:
    """Bucket filter; zero or empty fields impose no restriction."""

    prefix: str = ""
    min_keys: int = 0
    min_size: int = 0


def matches_filter(name: str, bs: BucketStats, cfg: FilterConfig) -> bool:
    """Whether a single bucket satisfies the filter."""
    if cfg.prefix and not name.startswith(cfg.prefix):
        return False
    if cfg.min_keys > 0 and bs.key_count < cfg.min_keys:
        return False
    if cfg.min_size > 0 and bs.size < cfg.min_size:
        return False
    return True


def filter_snapshot(snap: Snapshot | None, cfg: FilterConfig) -> Snapshot | None:
    """Return a new snapshot holding only matching buckets."""
    if snap is None:
        return None
    return Snapshot(
        buckets={
            name: bs for name, bs in snap.buckets.items() if matches_filter(name, bs, cfg)
        },
        timestamp=snap.timestamp,
    )