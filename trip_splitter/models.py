"""Data models for GPS fixes, trips and rejected rows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final


@dataclass(frozen=True, slots=True)
class Fix:
    """A single validated GPS observation.

    Attributes:
        device_id: Non-empty device identifier.
        latitude: Latitude in decimal degrees, within [-90, 90].
        longitude: Longitude in decimal degrees, within [-180, 180].
        timestamp: Timezone-aware instant. Naive input is read as UTC.
        timestamp_text: Timestamp exactly as it appeared in the input.
    """

    device_id: str
    latitude: float
    longitude: float
    timestamp: datetime
    timestamp_text: str


@dataclass(frozen=True, slots=True)
class Trip:
    """A contiguous run of one device's fixes with no split-worthy discontinuity.

    Note:
        Only runs with at least two fixes become trips. ``number`` counts kept
        trips per device, so dropped single-fix runs leave no gap.
    """

    device_id: str
    number: int
    fixes: tuple[Fix, ...]

    @property
    def trip_id(self) -> str:
        return f"trip_{self.number}"

    @property
    def point_count(self) -> int:
        return len(self.fixes)


@dataclass(frozen=True, slots=True)
class TripMetrics:
    """Kinematic summary of one trip, kept at full precision."""

    total_distance_km: float
    duration_min: float
    avg_speed_kmh: float
    max_speed_kmh: float
    point_count: int


@dataclass(frozen=True, slots=True)
class RejectRecord:
    """One input row that failed validation."""

    reason: str
    line: str


@dataclass(frozen=True, slots=True)
class SplitParams:
    """Thresholds of the trip split rule (strict greater-than comparisons)."""

    max_gap_minutes: float = 25.0
    max_jump_km: float = 2.0


REASON_TOO_FEW_COLUMNS: Final[str] = "too_few_columns"
REASON_EMPTY_DEVICE_ID: Final[str] = "empty_device_id"
REASON_INVALID_COORDINATES: Final[str] = "invalid_coordinates"
REASON_BAD_TIMESTAMP: Final[str] = "bad_timestamp"
REJECT_REASONS: Final[tuple[str, ...]] = (
    REASON_TOO_FEW_COLUMNS,
    REASON_EMPTY_DEVICE_ID,
    REASON_INVALID_COORDINATES,
    REASON_BAD_TIMESTAMP,
)

HEADER_COLUMNS: Final[tuple[str, ...]] = ("device_id", "lat", "lon", "timestamp")
REJECT_LINE_SEPARATOR: Final[str] = "|"

EARTH_RADIUS_KM: Final[float] = 6371.0088

PALETTE: Final[tuple[str, ...]] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)
STROKE_WIDTH: Final[int] = 4
STROKE_OPACITY: Final[float] = 0.9
