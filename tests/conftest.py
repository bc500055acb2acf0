"""Shared fixtures for trip_splitter tests."""

from datetime import UTC, datetime, timedelta

import pytest

from trip_splitter.models import Fix

T0 = datetime(2025, 8, 14, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def make_fix():
    """Factory for fixes placed `minutes` after a fixed start time."""

    def _make(lat: float, lon: float, minutes: float = 0.0, device_id: str = "A") -> Fix:
        ts = T0 + timedelta(minutes=minutes)
        return Fix(
            device_id=device_id,
            latitude=lat,
            longitude=lon,
            timestamp=ts,
            timestamp_text=ts.isoformat(),
        )

    return _make


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path."""

    def _write(text: str, name: str = "input.csv"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
