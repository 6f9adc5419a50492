# boltwatch

`boltwatch` analyses point-in-time snapshots of the buckets in a key/value
database. You build `Snapshot` objects from the bucket statistics you
collect. The package then compares, summarises, labels, records and exports
them. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Snapshots

`boltwatch.models` defines the core types:

- `BucketStats` has the fields `name`, `key_count`, `size` (in bytes) and `depth`.
  `str()` of it gives a one-line summary.
- `Snapshot` has the fields `buckets`, a dict that maps bucket names to
  `BucketStats`, and `timestamp`, which defaults to the current UTC time. Its
  methods are `is_empty()`, `total_keys()` and `total_size()`.
- `format_bytes(n)` renders byte counts as `512 B`, `1.50 KB`, `2.00 MB` or `1.00 GB`.
- `total_keys(stats)` and `total_size(stats)` sum over any iterable of `BucketStats`.

## Modules

| Module | Purpose |
| --- | --- |
| `boltwatch.delta` | Key and size changes per bucket between two snapshots. Covers added, removed and changed buckets: `compute_deltas`, `has_changes`, `format_deltas`, `format_delta_bytes` |
| `boltwatch.comparator` | A full comparison sorted by bucket name, with counts of added, removed and changed buckets: `compare_snapshots` → `CompareResult` |
| `boltwatch.differ` | Lists of added, removed, changed and unchanged bucket names: `diff_snapshots`, `format_diff`, `format_diff_summary`, `format_diff_table` |
| `boltwatch.digester` | An MD5 fingerprint over bucket names, key counts and sizes, taken in name order. Use it to detect change cheaply: `digest_snapshot`, `digests_match`, `format_digest`, `format_digest_diff` |
| `boltwatch.filtering` | Keep buckets by name prefix, minimum key count or minimum size: `FilterConfig`, `filter_snapshot`, `matches_filter` |
| `boltwatch.normalizer` | Replace negative values with zero and cap key counts or sizes: `NormalizeConfig`, `default_normalize_config`, `normalize_snapshot`, `format_normalized` |
| `boltwatch.labeler` | Label buckets `large`, `medium`, `small` or `empty` by thresholds: `LabelConfig`, `default_label_config`, `label_snapshot`, `format_labels`, `label_summary`, `format_label_summary` |
| `boltwatch.merger` | Merge two snapshots. A bucket found in both is resolved by a `MergeStrategy` (`PREFER_A`, `PREFER_B`, `SUM_KEYS`). The merged snapshot takes the later timestamp: `merge_snapshots` |
| `boltwatch.classifier` | Classify buckets as growing, shrinking, stable, new or removed, with a key growth rate per second: `classify_growth`, `format_classifications` |
| `boltwatch.alert` | Warning and critical alerts from key-count and size thresholds. Key counts are checked first: `AlertConfig`, `default_alert_config`, `check_alerts` |
| `boltwatch.annotator` | Notes on buckets near or over their limits. The critical thresholds of an `AlertConfig` act as the limits, and a threshold of zero is ignored: `annotate_snapshot`, `format_annotations` |
| `boltwatch.aggregator` | The top buckets by keys and by size, with totals: `aggregate`, `format_aggregate` |
| `boltwatch.baseline` | Drift of a current snapshot from a reference: `create_baseline`, `compute_drift` |
| `boltwatch.marker` | Labelled markers on snapshots, and drift since a marker: `MarkerBoard` (`add`, `get`, `remove`, `all`, `len()`), `compare_to_marker`, `has_marker_changes`, `marker_drift_summary`, `format_marker_board`, `format_marker_diff` |
| `boltwatch.history` | A thread-safe rolling window of bucket-stat lists. The default size is 60, and the oldest entries are evicted first. `latest()` and `all()` return copies: `History` |
| `boltwatch.export` | JSON or CSV export of a snapshot to a text stream: `ExportFormat`, `export_snapshot` |

Most functions accept `None` in place of a snapshot. Each one then returns an
empty result or a fixed message. `export_snapshot` is the exception: it raises
`ValueError` for a missing snapshot and for an unknown format.

## Example

```python
from boltwatch.models import BucketStats, Snapshot
from boltwatch.delta import compute_deltas, format_deltas
from boltwatch.digester import digest_snapshot, format_digest_diff

before = Snapshot(buckets={"users": BucketStats(name="users", key_count=10, size=1024)})
after = Snapshot(buckets={"users": BucketStats(name="users", key_count=15, size=2048)})

print(format_deltas(compute_deltas(before, after)))
print(format_digest_diff(digest_snapshot(before), digest_snapshot(after)))  # changed: keys +5
```

To export a snapshot as JSON:

```python
import sys
from boltwatch.export import ExportFormat, export_snapshot

export_snapshot(sys.stdout, after, ExportFormat.JSON)
```

## What the package does not do

`boltwatch` is a library only. It does not open or read database files, and
it has no command-line program. It has no polling loop that watches a
database over time. Collecting bucket statistics is left to the caller, who
fills `Snapshot` objects with them. Snapshots are kept only in memory, in a
`History` or on a `MarkerBoard`. The only way to write them out is
`export_snapshot`.