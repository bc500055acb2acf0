"""Inspect an input file before splitting it into trips."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from trip_splitter.ingest import ingest_rows
from trip_splitter.models import Fix
from trip_splitter.segment import sort_track
from trip_splitter.timeutils import DeltaStats, delta_stats


@dataclass(frozen=True, slots=True)
class DeviceSummary:
    """Per-device view of the accepted fixes."""

    device_id: str
    fixes: int
    first_time: datetime
    last_time: datetime
    delta: DeltaStats | None
    duplicate_timestamps: int
    out_of_order: int
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


@dataclass(frozen=True, slots=True)
class InspectResult:
    """High-level input inspection result."""

    rows_total: int
    header_skipped: bool
    fixes_accepted: int
    rejects_by_reason: dict[str, int]
    devices: tuple[DeviceSummary, ...]


def summarize_device(device_id: str, fixes: Sequence[Fix]) -> DeviceSummary:
    """Summarize one device's fixes (in file order; must be non-empty)."""

    # Fixes that arrive earlier than the fix before them in the file.
    out_of_order = sum(1 for a, b in zip(fixes, fixes[1:]) if b.timestamp < a.timestamp)
    times = [f.timestamp for f in sort_track(fixes)]
    dupe = 0
    for i in range(1, len(times)):
        if times[i] == times[i - 1]:
            dupe += 1

    lats = [f.latitude for f in fixes]
    lons = [f.longitude for f in fixes]
    return DeviceSummary(
        device_id=device_id,
        fixes=len(fixes),
        first_time=times[0],
        last_time=times[-1],
        delta=delta_stats(times),
        duplicate_timestamps=dupe,
        out_of_order=out_of_order,
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
    )


def inspect_rows(rows: Iterable[Sequence[str]]) -> InspectResult:
    """Classify rows the same way the pipeline does and summarize the outcome."""

    ingest = ingest_rows(rows)
    return InspectResult(
        rows_total=ingest.rows_total,
        header_skipped=ingest.header_skipped,
        fixes_accepted=ingest.fix_count,
        rejects_by_reason=ingest.reject_counts(),
        devices=tuple(summarize_device(d, fx) for d, fx in ingest.fixes_by_device.items()),
    )
