"""Per-trip distance, duration and speed."""

from __future__ import annotations

from typing import Sequence

from trip_splitter.geo import fix_distance_km, minutes_between, speed_kmh
from trip_splitter.models import Fix, TripMetrics


def compute_metrics(fixes: Sequence[Fix]) -> TripMetrics:
    """Compute the metrics of one trip.

    Distance is the sum of consecutive segment distances, not the
    start-to-end displacement. Segments without positive duration are left
    out of the maximum speed; if no segment has one, the maximum is 0.0.

    Args:
        fixes: Fixes of one trip in chronological order.

    Returns:
        TripMetrics at full precision.

    Raises:
        ValueError: If fewer than two fixes are given.
    """

    if len(fixes) < 2:
        raise ValueError(f"A trip needs at least 2 fixes, got {len(fixes)}")

    total_km = 0.0
    max_kmh = 0.0
    for prev, cur in zip(fixes, fixes[1:]):
        seg_km = fix_distance_km(prev, cur)
        total_km += seg_km
        seg_min = minutes_between(prev.timestamp, cur.timestamp)
        if seg_min > 0:
            max_kmh = max(max_kmh, speed_kmh(seg_km, seg_min))

    duration_min = max(0.0, minutes_between(fixes[0].timestamp, fixes[-1].timestamp))
    return TripMetrics(
        total_distance_km=total_km,
        duration_min=duration_min,
        avg_speed_kmh=speed_kmh(total_km, duration_min),
        max_speed_kmh=max_kmh,
        point_count=len(fixes),
    )
