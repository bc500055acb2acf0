"""Tests for per-trip metrics."""

import pytest

from trip_splitter.geo import haversine_km
from trip_splitter.metrics import compute_metrics

KM_PER_CENTIDEGREE = haversine_km(0.0, 0.0, 0.0, 0.01)  # ~1.1119508 km on the equator


def test_two_fix_trip(make_fix):
    m = compute_metrics([make_fix(0.0, 0.0, minutes=0), make_fix(0.0, 0.01, minutes=10)])
    assert m.point_count == 2
    assert m.total_distance_km == pytest.approx(KM_PER_CENTIDEGREE)
    assert m.duration_min == pytest.approx(10.0)
    assert m.avg_speed_kmh == pytest.approx(KM_PER_CENTIDEGREE * 6)
    assert m.max_speed_kmh == pytest.approx(KM_PER_CENTIDEGREE * 6)


def test_distance_is_path_length_not_displacement(make_fix):
    # out and back: net displacement zero
    fixes = [
        make_fix(0.0, 0.0, minutes=0),
        make_fix(0.0, 0.01, minutes=5),
        make_fix(0.0, 0.0, minutes=10),
    ]
    m = compute_metrics(fixes)
    assert m.total_distance_km == pytest.approx(2 * KM_PER_CENTIDEGREE)


def test_zero_duration_trip_has_zero_speeds(make_fix):
    m = compute_metrics([make_fix(0.0, 0.0, minutes=0), make_fix(0.0, 0.01, minutes=0)])
    assert m.duration_min == 0.0
    assert m.total_distance_km == pytest.approx(KM_PER_CENTIDEGREE)
    assert m.avg_speed_kmh == 0.0
    assert m.max_speed_kmh == 0.0


def test_zero_duration_segments_are_left_out_of_max_speed(make_fix):
    fixes = [
        make_fix(0.0, 0.0, minutes=0),
        make_fix(0.0, 0.01, minutes=0),  # instantaneous 1.1 km hop
        make_fix(0.0, 0.02, minutes=60),
    ]
    m = compute_metrics(fixes)
    assert m.max_speed_kmh == pytest.approx(KM_PER_CENTIDEGREE)
    assert m.avg_speed_kmh == pytest.approx(2 * KM_PER_CENTIDEGREE)
    assert m.max_speed_kmh < m.avg_speed_kmh


def test_max_speed_picks_fastest_segment(make_fix):
    fixes = [
        make_fix(0.0, 0.0, minutes=0),
        make_fix(0.0, 0.01, minutes=10),  # ~6.7 km/h
        make_fix(0.0, 0.02, minutes=11),  # ~66.7 km/h
        make_fix(0.0, 0.03, minutes=21),
    ]
    m = compute_metrics(fixes)
    assert m.max_speed_kmh == pytest.approx(KM_PER_CENTIDEGREE * 60)
    assert m.duration_min == pytest.approx(21.0)
    assert m.avg_speed_kmh == pytest.approx(3 * KM_PER_CENTIDEGREE / (21 / 60))


def test_stationary_trip(make_fix):
    m = compute_metrics([make_fix(1.0, 1.0, minutes=0), make_fix(1.0, 1.0, minutes=3)])
    assert m.total_distance_km == 0.0
    assert m.avg_speed_kmh == 0.0
    assert m.max_speed_kmh == 0.0
    assert m.duration_min == pytest.approx(3.0)


def test_needs_two_fixes(make_fix):
    with pytest.raises(ValueError):
        compute_metrics([make_fix(0.0, 0.0)])
