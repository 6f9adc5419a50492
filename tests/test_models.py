from boltwatch.models import BucketStats, Snapshot, format_bytes, total_keys, total_size


def test_format_bytes_plain_bytes():
    assert format_bytes(512) == "512 B"


def test_format_bytes_kilobytes():
    assert format_bytes(1024) == "1.00 KB"


def test_format_bytes_gigabytes():
    assert format_bytes(1024 * 1024 * 1024) == "1.00 GB"


def test_format_bytes_units_by_threshold():
    assert format_bytes(1024 * 1024).endswith(" MB")
    assert format_bytes(1024 * 1024 - 1).endswith(" KB")
    assert format_bytes(1023).endswith(" B")


def test_total_keys_empty():
    assert total_keys([]) == 0
    assert total_size([]) == 0


def test_total_keys_single():
    bs = BucketStats(name="users", key_count=42, size=2048)
    assert total_keys([bs]) == bs.key_count
    assert total_size([bs]) == bs.size


def test_totals_are_additive():
    left = [BucketStats(name="a", key_count=10, size=512)]
    right = [BucketStats(name="b", key_count=20, size=1024)]
    assert total_keys(left + right) == total_keys(left) + total_keys(right)
    assert total_size(left + right) == total_size(left) + total_size(right)


def test_snapshot_totals_match_module_functions():
    buckets = {
        "a": BucketStats(name="a", key_count=10, size=512),
        "b": BucketStats(name="b", key_count=20, size=1024),
    }
    snap = Snapshot(buckets=buckets)
    assert snap.total_keys() == total_keys(buckets.values())
    assert snap.total_size() == total_size(buckets.values())


def test_snapshot_is_empty():
    assert Snapshot().is_empty() is True
    assert Snapshot(buckets={"x": BucketStats(name="x")}).is_empty() is False


def test_bucket_stats_str_contains_fields():
    bs = BucketStats(name="users", key_count=42, size=2048, depth=3)
    text = str(bs)
    assert 'bucket="users"' in text
    assert "keys=42" in text
    assert f"size={format_bytes(2048)}" in text
    assert "depth=3" in text