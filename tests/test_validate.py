"""Tests for numeric, coordinate and header checks."""

import pytest

from trip_splitter.validate import is_header_row, is_valid_latitude, is_valid_longitude, parse_number

TS = "2025-08-14T12:34:56Z"


@pytest.mark.parametrize(
    "text, expected",
    [("12", 12.0), ("-0.5", -0.5), (" 12.5 ", 12.5), (".5", 0.5), ("+3.", 3.0), ("1e1", 10.0), ("-2.5E-1", -0.25)],
)
def test_parse_number_accepts_plain_numbers(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", " ", None, "abc", "12a", "nan", "inf", "-Infinity", "1_000", "0x10", "1e400", "1,5"])
def test_parse_number_rejects_non_numbers(text):
    assert parse_number(text) is None


class TestCoordinateRanges:
    def test_latitude_bounds_are_inclusive(self):
        assert is_valid_latitude("90")
        assert is_valid_latitude("-90")
        assert is_valid_latitude("0")

    def test_latitude_out_of_range(self):
        assert not is_valid_latitude("91")
        assert not is_valid_latitude("-90.000001")

    def test_longitude_bounds_are_inclusive(self):
        assert is_valid_longitude("180")
        assert is_valid_longitude("-180")

    def test_longitude_out_of_range(self):
        assert not is_valid_longitude("180.5")
        assert not is_valid_longitude("-181")

    def test_non_numeric_is_invalid(self):
        assert not is_valid_latitude("north")
        assert not is_valid_longitude("")


class TestHeaderRow:
    def test_canonical_header(self):
        assert is_header_row(["device_id", "lat", "lon", "timestamp"])

    def test_any_column_name_case_insensitive(self):
        assert is_header_row(["id", " LAT ", "x", "y"])
        assert is_header_row(["Device_ID", "latitude", "longitude", "time"])

    def test_short_row_is_garbage(self):
        assert is_header_row(["A", "1.0", "2.0"])

    def test_valid_data_row_is_not_a_header(self):
        assert not is_header_row(["A", "48.1", "11.5", TS])

    def test_data_row_with_extra_columns_is_not_a_header(self):
        assert not is_header_row(["A", "48.1", "11.5", TS, "extra", "more"])

    def test_out_of_range_numbers_still_count_as_data(self):
        assert not is_header_row(["A", "91", "11.5", TS])

    def test_empty_device_id_still_counts_as_data(self):
        assert not is_header_row(["", "48.1", "11.5", TS])

    def test_non_numeric_coordinates_look_like_a_header(self):
        assert is_header_row(["A", "latitude", "11.5", TS])

    def test_unparseable_timestamp_looks_like_a_header(self):
        assert is_header_row(["A", "48.1", "11.5", "time"])
