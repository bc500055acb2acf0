"""GeoJSON export of computed trips."""

from __future__ import annotations

import json
from typing import Any, Iterable

from trip_splitter.models import PALETTE, STROKE_OPACITY, STROKE_WIDTH, Trip, TripMetrics


def color_for(index: int) -> str:
    """Palette color for the index-th exported trip (0-based, global order)."""

    return PALETTE[index % len(PALETTE)]


def trip_feature(trip: Trip, metrics: TripMetrics, color: str) -> dict[str, Any]:
    """Build one GeoJSON Feature with a LineString in [lon, lat] order.

    Metrics are rounded here and only here: distance to 3 decimals,
    duration and speeds to 2.
    """

    return {
        "type": "Feature",
        "properties": {
            "trip_id": trip.trip_id,
            "device_id": trip.device_id,
            "point_count": metrics.point_count,
            "distance_km": round(metrics.total_distance_km, 3),
            "duration_min": round(metrics.duration_min, 2),
            "avg_speed_kmh": round(metrics.avg_speed_kmh, 2),
            "max_speed_kmh": round(metrics.max_speed_kmh, 2),
            "stroke": color,
            "stroke-width": STROKE_WIDTH,
            "stroke-opacity": STROKE_OPACITY,
        },
        "geometry": {
            "type": "LineString",
            "coordinates": [[f.longitude, f.latitude] for f in trip.fixes],
        },
    }


def build_features(
    trips: Iterable[tuple[Trip, TripMetrics]],
    color_index: int = 0,
) -> tuple[list[dict[str, Any]], int]:
    """Turn trips into features, cycling colors by global export order.

    Args:
        trips: (trip, metrics) pairs in export order.
        color_index: Number of trips already exported before these.

    Returns:
        (features, next color_index)
    """

    features: list[dict[str, Any]] = []
    for trip, metrics in trips:
        features.append(trip_feature(trip, metrics, color_for(color_index)))
        color_index += 1
    return features, color_index


def feature_collection(features: Iterable[dict[str, Any]]) -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


def dumps_geojson(doc: dict[str, Any], indent: int | None = None) -> str:
    """Serialize a document; raises ValueError on NaN/inf and TypeError on foreign objects."""

    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(doc, ensure_ascii=False, allow_nan=False, indent=indent, separators=separators)

