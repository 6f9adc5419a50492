"""Stable fingerprints of snapshots for cheap change detection."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from boltwatch.models import Snapshot, format_bytes


@dataclass
class DigestResult:
    """Fingerprint summary of a snapshot."""

    hash: str
    bucket_count: int = 0
    key_count: int = 0
    byte_size: int = 0


def _md5_hex(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def digest_snapshot(s: Snapshot | None) -> DigestResult:
    """Compute a hash over bucket names, key counts and sizes in name order."""
    if s is None or s.is_empty():
        return DigestResult(hash=_md5_hex(""))

    names = sorted(s.buckets)
    payload = "".join(
        f"{name}:{s.buckets[name].key_count}:{s.buckets[name].size};" for name in names
    )
    return DigestResult(
        hash=_md5_hex(payload),
        bucket_count=len(names),
        key_count=sum(s.buckets[name].key_count for name in names),
        byte_size=sum(s.buckets[name].size for name in names),
    )


def digests_match(a: DigestResult | None, b: DigestResult | None) -> bool:
    """True if both digests describe identical snapshots."""
    if a is None or b is None:
        return a is b
    return a.hash == b.hash


def format_digest(d: DigestResult | None) -> str:
    """Human-readable summary of a digest."""
    if d is None:
        return "(no digest)"
    return (
        "Snapshot Digest\n"
        + "-" * 36
        + "\n"
        + f"  Hash:    {d.hash}\n"
        + f"  Buckets: {d.bucket_count}\n"
        + f"  Keys:    {d.key_count}\n"
        + f"  Size:    {format_bytes(d.byte_size)}\n"
    )


def _signed(n: int) -> str:
    return f"+{n}" if n >= 0 else str(n)


def format_digest_diff(prev: DigestResult | None, curr: DigestResult | None) -> str:
    """Short message describing whether two digests match."""
    if digests_match(prev, curr):
        return "no changes detected"
    if prev is None:
        return "initial snapshot captured"
    if curr is None:
        raise ValueError("current digest is missing")

    parts = []
    key_delta = curr.key_count - prev.key_count
    if key_delta:
        parts.append(f"keys {_signed(key_delta)}")
    bucket_delta = curr.bucket_count - prev.bucket_count
    if bucket_delta:
        parts.append(f"buckets {_signed(bucket_delta)}")

    if not parts:
        return f"hash changed ({prev.hash[:8]} → {curr.hash[:8]})"
    return "changed: " + ", ".join(parts)