"""Geospatial and kinematic helpers (no external dependencies)."""

from __future__ import annotations

import math
from datetime import datetime

from trip_splitter.models import EARTH_RADIUS_KM, Fix


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute Haversine distance in kilometers between two lat/lon points.

    Args:
        lat1: Latitude 1 in degrees.
        lon1: Longitude 1 in degrees.
        lat2: Latitude 2 in degrees.
        lon2: Longitude 2 in degrees.

    Returns:
        Great-circle distance in kilometers on a sphere of mean Earth radius.
    """

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def fix_distance_km(a: Fix, b: Fix) -> float:
    """Haversine distance between two fixes."""

    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def minutes_between(t1: datetime, t2: datetime) -> float:
    """Signed difference ``t2 - t1`` in minutes (negative if t2 precedes t1)."""

    return (t2 - t1).total_seconds() / 60.0


def speed_kmh(distance_km: float, duration_min: float) -> float:
    """Average speed in km/h; zero when the duration is not positive."""

    if duration_min > 0:
        return distance_km / (duration_min / 60.0)
    return 0.0
