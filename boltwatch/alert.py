"""Threshold alerts for buckets."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import IntEnum

from boltwatch.models import Snapshot, format_bytes


class AlertLevel(IntEnum):
    NONE = 0
    WARNING = 1
    CRITICAL = 2


@dataclass
class Alert:
    """A threshold breach for one bucket."""

    bucket: str
    level: AlertLevel
    message: str


@dataclass
class AlertConfig:
    """Key-count and size thresholds for warnings and critical alerts."""

    warn_key_count: int = 0
    critical_key_count: int = 0
    warn_size_bytes: int = 0
    critical_size_bytes: int = 0


def default_alert_config() -> AlertConfig:
    """10k/100k keys and 10 MB/100 MB size thresholds."""
    return AlertConfig(
        warn_key_count=10_000,
        critical_key_count=100_000,
        warn_size_bytes=10 * 1024 * 1024,
        critical_size_bytes=100 * 1024 * 1024,
    )


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def check_alerts(snap: Snapshot | None, cfg: AlertConfig) -> list[Alert]:
    """One alert per bucket breaching a threshold; key counts are checked first."""
    if snap is None:
        return []

    alerts: list[Alert] = []
    for bs in snap.buckets.values():
        keys, size, name = bs.key_count, bs.size, _quote(bs.name)
        if keys >= cfg.critical_key_count:
            level = AlertLevel.CRITICAL
            msg = f"bucket {name} has {keys} keys (critical threshold: {cfg.critical_key_count})"
        elif keys >= cfg.warn_key_count:
            level = AlertLevel.WARNING
            msg = f"bucket {name} has {keys} keys (warn threshold: {cfg.warn_key_count})"
        elif size >= cfg.critical_size_bytes:
            level = AlertLevel.CRITICAL
            msg = (
                f"bucket {name} uses {format_bytes(size)} "
                f"(critical threshold: {format_bytes(cfg.critical_size_bytes)})"
            )
        elif size >= cfg.warn_size_bytes:
            level = AlertLevel.WARNING
            msg = (
                f"bucket {name} uses {format_bytes(size)} "
                f"(warn threshold: {format_bytes(cfg.warn_size_bytes)})"
            )
        else:
            continue
        alerts.append(Alert(bucket=bs.name, level=level, message=msg))
    return alerts