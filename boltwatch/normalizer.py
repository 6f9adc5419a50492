"""Clamping and cleaning of snapshot values."""

from __future__ import annotations

from dataclasses import dataclass

from boltwatch.models import BucketStats, Snapshot, format_bytes


@dataclass
class NormalizeConfig:
    """Normalization settings; a cap of zero means no cap."""

    cap_size: int = 0
    cap_keys: int = 0
    zero_negative: bool = False


def default_normalize_config() -> NormalizeConfig:
    """No caps, negative values replaced with zero."""
    return NormalizeConfig(cap_size=0, cap_keys=0, zero_negative=True)


def normalize_snapshot(snap: Snapshot | None, cfg: NormalizeConfig) -> Snapshot | None:
    """Return a new snapshot with values adjusted according to cfg."""
    if snap is None:
        return None

    buckets: dict[str, BucketStats] = {}
    for name, bs in snap.buckets.items():
        keys = bs.key_count
        size = bs.size
        if cfg.zero_negative:
            keys = max(keys, 0)
            size = max(size, 0)
        if cfg.cap_keys > 0:
            keys = min(keys, cfg.cap_keys)
        if cfg.cap_size > 0:
            size = min(size, cfg.cap_size)
        buckets[name] = BucketStats(key_count=keys, size=size)

    return Snapshot(buckets=buckets, timestamp=snap.timestamp)


def format_normalized(original: Snapshot | None, normalized: Snapshot | None) -> str:
    """Table of a normalized snapshot, marking buckets whose values were adjusted."""
    if original is None or normalized is None:
        return "(no data to format)\n"

    lines = [
        f"Normalized Snapshot — {normalized.timestamp.strftime('%H:%M:%S')}\n",
        f"{'Bucket':<20} {'Keys':>10} {'Size':>10} {'Changed':>8}\n",
        f"{'------':<20} {'----':>10} {'----':>10} {'-------':>8}\n",
    ]
    for name, norm in normalized.buckets.items():
        orig = original.buckets.get(name)
        changed = ""
        if orig is not None and (orig.key_count, orig.size) != (norm.key_count, norm.size):
            changed = "yes"
        lines.append(
            f"{name:<20} {norm.key_count:>10} {format_bytes(norm.size):>10} {changed:>8}\n"
        )
    return "".join(lines)