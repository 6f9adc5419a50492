"""Analysis of key/value database bucket snapshots: deltas, comparisons, digests, filters, labels, alerts, markers, history and exports."""

__version__ = "0.1.0"