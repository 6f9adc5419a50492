from datetime import timedelta

from boltwatch.merger import MergeStrategy, merge_snapshots
from boltwatch.models import BucketStats, Snapshot


def make_snapshot(buckets):
    return Snapshot(
        buckets={
            name: BucketStats(name=name, key_count=keys, size=keys * 64)
            for name, keys in buckets.items()
        }
    )


def test_both_nil():
    assert merge_snapshots(None, None, MergeStrategy.PREFER_A) is None


def test_nil_a():
    b = make_snapshot({"alpha": 5})
    result = merge_snapshots(None, b, MergeStrategy.PREFER_A)
    assert result is not None
    assert result.snapshot is b


def test_nil_b():
    a = make_snapshot({"alpha": 5})
    result = merge_snapshots(a, None, MergeStrategy.PREFER_A)
    assert result is not None
    assert result.snapshot is a


def test_no_conflicts():
    a = make_snapshot({"alpha": 3})
    b = make_snapshot({"beta": 7})
    result = merge_snapshots(a, b, MergeStrategy.PREFER_A)
    assert result.conflicts == []
    assert len(result.snapshot.buckets) == 2


def test_prefer_a():
    a = make_snapshot({"shared": 10})
    b = make_snapshot({"shared": 99})
    result = merge_snapshots(a, b, MergeStrategy.PREFER_A)
    assert result.snapshot.buckets["shared"].key_count == 10
    assert result.conflicts == ["shared"]


def test_prefer_b():
    a = make_snapshot({"shared": 10})
    b = make_snapshot({"shared": 99})
    result = merge_snapshots(a, b, MergeStrategy.PREFER_B)
    assert result.snapshot.buckets["shared"].key_count == 99


def test_sum_keys():
    a = make_snapshot({"shared": 10})
    b = make_snapshot({"shared": 5})
    result = merge_snapshots(a, b, MergeStrategy.SUM_KEYS)
    assert result.snapshot.buckets["shared"].key_count == 15
    assert result.snapshot.buckets["shared"].size == (10 + 5) * 64


def test_uses_latest_timestamp():
    a = make_snapshot({"a": 1})
    b = make_snapshot({"b": 2})
    b.timestamp = b.timestamp + timedelta(seconds=10)
    result = merge_snapshots(a, b, MergeStrategy.PREFER_A)
    assert result.snapshot.timestamp == b.timestamp


def test_inputs_not_mutated():
    a = make_snapshot({"shared": 10})
    b = make_snapshot({"shared": 5, "extra": 1})
    merge_snapshots(a, b, MergeStrategy.SUM_KEYS)
    assert set(a.buckets) == {"shared"}
    assert a.buckets["shared"].key_count == 10