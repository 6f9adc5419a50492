from boltwatch.labeler import (
    BucketLabel,
    default_label_config,
    format_label_summary,
    format_labels,
    label_snapshot,
    label_summary,
)
from boltwatch.models import BucketStats, Snapshot


def make_snapshot(buckets):
    return Snapshot(buckets=buckets)


def make_format_labels():
    snap = make_snapshot(
        {
            "alpha": BucketStats(key_count=0, size=0),
            "beta": BucketStats(key_count=500, size=256 * 1024),
            "gamma": BucketStats(key_count=5000, size=2 * 1024 * 1024),
            "delta": BucketStats(key_count=50000, size=20 * 1024 * 1024),
        }
    )
    return label_snapshot(snap, default_label_config())


def test_label_nil():
    assert label_snapshot(None, default_label_config()) == []


def test_label_empty():
    assert label_snapshot(make_snapshot({}), default_label_config()) == []


def test_label_empty_bucket():
    result = label_snapshot(
        make_snapshot({"empty": BucketStats(key_count=0, size=0)}), default_label_config()
    )
    assert len(result) == 1
    assert result[0].label is BucketLabel.EMPTY


def test_label_small_bucket():
    result = label_snapshot(
        make_snapshot({"small": BucketStats(key_count=50, size=512)}), default_label_config()
    )
    assert result[0].label is BucketLabel.SMALL


def test_label_medium_bucket():
    result = label_snapshot(
        make_snapshot({"medium": BucketStats(key_count=5000, size=512 * 1024)}),
        default_label_config(),
    )
    assert result[0].label is BucketLabel.MEDIUM


def test_label_large_bucket():
    result = label_snapshot(
        make_snapshot({"large": BucketStats(key_count=50000, size=20 * 1024 * 1024)}),
        default_label_config(),
    )
    assert result[0].label is BucketLabel.LARGE


def test_label_multiple_buckets():
    result = label_snapshot(
        make_snapshot(
            {
                "a": BucketStats(key_count=0),
                "b": BucketStats(key_count=100),
                "c": BucketStats(key_count=20000),
            }
        ),
        default_label_config(),
    )
    assert len(result) == 3
    assert {lb.name: lb.label for lb in result} == {
        "a": BucketLabel.EMPTY,
        "b": BucketLabel.SMALL,
        "c": BucketLabel.LARGE,
    }


def test_format_labels_empty():
    assert "No buckets" in format_labels(None)


def test_format_labels_contains_header():
    out = format_labels(make_format_labels())
    assert "Bucket" in out
    assert "Label" in out


def test_format_labels_contains_bucket_names():
    out = format_labels(make_format_labels())
    for name in ("alpha", "beta", "gamma", "delta"):
        assert name in out


def test_format_labels_sorted_by_name():
    out = format_labels(make_format_labels())
    positions = [out.index(name) for name in ("alpha", "beta", "delta", "gamma")]
    assert positions == sorted(positions)


def test_format_labels_contains_label_values():
    out = format_labels(make_format_labels())
    for lbl in ("empty", "small", "medium", "large"):
        assert lbl in out


def test_format_label_summary_empty():
    assert "No buckets" in format_label_summary(None)


def test_format_label_summary_counts():
    out = format_label_summary(make_format_labels())
    assert "large=1" in out
    assert "empty=1" in out


def test_label_summary_counts_match_input():
    labeled = make_format_labels()
    summary = label_summary(labeled)
    assert sum(summary.values()) == len(labeled)
    assert summary[BucketLabel.MEDIUM] == 1