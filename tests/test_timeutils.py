"""Tests for timestamp parsing and interval statistics."""

from datetime import UTC, datetime, timedelta

import pytest

from trip_splitter.timeutils import delta_stats, parse_timestamp


class TestParseTimestamp:
    def test_iso_with_z(self):
        dt = parse_timestamp("2025-08-14T12:34:56Z")
        assert dt == datetime(2025, 8, 14, 12, 34, 56, tzinfo=UTC)
        assert dt.tzinfo is not None

    def test_naive_is_read_as_utc(self):
        assert parse_timestamp("2025-08-14 12:34:56") == datetime(2025, 8, 14, 12, 34, 56, tzinfo=UTC)

    def test_offset_is_kept(self):
        dt = parse_timestamp("2025-08-14T14:34:56+02:00")
        assert dt.utcoffset() == timedelta(hours=2)
        assert dt == datetime(2025, 8, 14, 12, 34, 56, tzinfo=UTC)

    def test_fractional_seconds_are_truncated(self):
        assert parse_timestamp("2025-08-14T12:34:56.750Z") == datetime(2025, 8, 14, 12, 34, 56, tzinfo=UTC)

    def test_fractional_epoch_is_truncated(self):
        assert parse_timestamp("@1.9") == datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)

    def test_date_only(self):
        assert parse_timestamp("2025-08-14") == datetime(2025, 8, 14, tzinfo=UTC)

    def test_slash_variant(self):
        assert parse_timestamp("2025/08/14 12:34:56") == datetime(2025, 8, 14, 12, 34, 56, tzinfo=UTC)

    def test_dotted_european_variant(self):
        assert parse_timestamp("14.08.2025 12:34:56") == datetime(2025, 8, 14, 12, 34, 56, tzinfo=UTC)

    def test_unix_epoch(self):
        assert parse_timestamp("@0") == datetime(1970, 1, 1, tzinfo=UTC)

    def test_surrounding_whitespace(self):
        assert parse_timestamp("  2025-08-14T12:34:56Z ") is not None

    @pytest.mark.parametrize(
        "text",
        ["", "   ", None, "yesterday", "2025-13-01T00:00:00Z", "2025-08-14T25:00:00Z", "@abc", "12.5"],
    )
    def test_unparseable_returns_none(self, text):
        assert parse_timestamp(text) is None


def test_delta_stats():
    t0 = datetime(2025, 8, 14, tzinfo=UTC)
    ts = [t0 + timedelta(seconds=s) for s in (0, 10, 20, 50, 110)]
    stats = delta_stats(ts)
    assert stats is not None
    assert stats.count == 4
    assert stats.min_s == 10.0
    assert stats.max_s == 60.0
    assert stats.median_s == pytest.approx(20.0)


def test_delta_stats_needs_two_points():
    assert delta_stats([datetime(2025, 8, 14, tzinfo=UTC)]) is None
