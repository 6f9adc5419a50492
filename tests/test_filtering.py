from boltwatch.filtering import FilterConfig, filter_snapshot, matches_filter
from boltwatch.models import BucketStats, Snapshot


def make_snapshot():
    data = {
        "users": (100, 2048),
        "sessions": (5, 512),
        "logs": (50, 8192),
        "log_arch": (10, 4096),
    }
    return Snapshot(
        buckets={
            name: BucketStats(name=name, key_count=keys, size=size)
            for name, (keys, size) in data.items()
        }
    )


def test_filter_snapshot_nil():
    assert filter_snapshot(None, FilterConfig()) is None


def test_filter_snapshot_no_filter():
    snap = make_snapshot()
    result = filter_snapshot(snap, FilterConfig())
    assert set(result.buckets) == set(snap.buckets)
    assert result is not snap


def test_filter_snapshot_by_prefix():
    result = filter_snapshot(make_snapshot(), FilterConfig(prefix="log"))
    assert set(result.buckets) == {"logs", "log_arch"}


def test_filter_snapshot_by_min_keys():
    result = filter_snapshot(make_snapshot(), FilterConfig(min_keys=20))
    assert set(result.buckets) == {"users", "logs"}


def test_filter_snapshot_by_min_size():
    result = filter_snapshot(make_snapshot(), FilterConfig(min_size=2000))
    assert len(result.buckets) == 3
    assert "sessions" not in result.buckets


def test_filter_snapshot_combined_filters():
    result = filter_snapshot(make_snapshot(), FilterConfig(prefix="log", min_keys=20))
    assert set(result.buckets) == {"logs"}


def test_filter_snapshot_preserves_timestamp_and_original():
    snap = make_snapshot()
    result = filter_snapshot(snap, FilterConfig(prefix="log"))
    assert result.timestamp == snap.timestamp
    assert len(snap.buckets) == 4


def test_matches_filter_pass():
    bs = BucketStats(key_count=50, size=1024)
    assert matches_filter("users", bs, FilterConfig()) is True


def test_matches_filter_fail_prefix():
    bs = BucketStats(key_count=50, size=1024)
    assert matches_filter("users", bs, FilterConfig(prefix="log")) is False


def test_matches_filter_thresholds():
    bs = BucketStats(key_count=50, size=1024)
    assert matches_filter("users", bs, FilterConfig(min_keys=50, min_size=1024)) is True
    assert matches_filter("users", bs, FilterConfig(min_keys=51)) is False
    assert matches_filter("users", bs, FilterConfig(min_size=1025)) is False