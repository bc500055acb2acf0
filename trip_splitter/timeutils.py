"""Timestamp parsing and sampling-interval utilities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final, Iterable

# Tried in order after ISO-8601 fails.
FALLBACK_FORMATS: Final[tuple[str, ...]] = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%dT%H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y",
)


def _as_aware(dt: datetime) -> datetime:
    # Instants are compared at whole-second precision; fractions are dropped.
    dt = dt.replace(microsecond=0)
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=UTC)
    return dt


def parse_timestamp(text: str | None) -> datetime | None:
    """Parse timestamp text into a timezone-aware datetime.

    Supported formats:
      - ISO-8601 as accepted by ``datetime.fromisoformat``, e.g.
        "2025-08-14T12:34:56Z", "2025-08-14 12:34:56+02:00", "2025-08-14"
      - "YYYY/MM/DD HH:MM:SS" and a few other common variants
      - "@<unix seconds>"

    Naive values are taken as UTC; explicit offsets are kept as given.
    Fractional seconds are truncated.

    Args:
        text: Timestamp text.

    Returns:
        Timezone-aware datetime, or None if the text cannot be parsed.
    """

    if text is None:
        return None
    s = text.strip()
    if not s:
        return None

    if s.startswith("@"):
        try:
            return _as_aware(datetime.fromtimestamp(float(s[1:]), tz=UTC))
        except (ValueError, OverflowError, OSError):
            return None

    try:
        return _as_aware(datetime.fromisoformat(s))
    except ValueError:
        pass

    for fmt in FALLBACK_FORMATS:
        try:
            return _as_aware(datetime.strptime(s, fmt))
        except ValueError:
            continue
    return None


@dataclass(frozen=True, slots=True)
class DeltaStats:
    """Sampling interval stats (seconds)."""

    count: int
    min_s: float
    median_s: float
    p95_s: float
    max_s: float


def delta_stats(timestamps_sorted: Iterable[datetime]) -> DeltaStats | None:
    """Compute basic sampling-interval statistics.

    Args:
        timestamps_sorted: Instants sorted ascending.

    Returns:
        DeltaStats or None if less than 2 points.
    """

    ts = list(timestamps_sorted)
    if len(ts) < 2:
        return None
    deltas = [(ts[i] - ts[i - 1]).total_seconds() for i in range(1, len(ts)) if ts[i] >= ts[i - 1]]
    if not deltas:
        return None
    deltas.sort()
    n = len(deltas)
    median = deltas[n // 2] if n % 2 == 1 else 0.5 * (deltas[n // 2 - 1] + deltas[n // 2])
    p95 = deltas[int(0.95 * (n - 1))]
    return DeltaStats(
        count=n,
        min_s=deltas[0],
        median_s=median,
        p95_s=p95,
        max_s=deltas[-1],
    )
