"""Trip segmentation of per-device fix sequences."""

from __future__ import annotations

from typing import Sequence

from trip_splitter.geo import fix_distance_km, minutes_between
from trip_splitter.models import Fix, SplitParams, Trip


def sort_track(fixes: Sequence[Fix]) -> list[Fix]:
    """Sort fixes by timestamp; equal timestamps keep their ingestion order."""

    return sorted(fixes, key=lambda f: f.timestamp)


def should_split(gap_min: float, jump_km: float, params: SplitParams) -> bool:
    """True if a gap or jump strictly exceeds its threshold."""

    return gap_min > params.max_gap_minutes or jump_km > params.max_jump_km


def split_track(track: Sequence[Fix], params: SplitParams) -> list[list[Fix]]:
    """Cut a sorted track into maximal runs without a split-worthy discontinuity.

    Each fix is compared with the fix right before it, not with the start of
    its run. Runs of a single fix are returned as well.

    Args:
        track: Fixes of one device, sorted ascending by timestamp.
        params: Split thresholds.

    Returns:
        Runs in chronological order. Empty if track is empty.
    """

    if not track:
        return []

    runs: list[list[Fix]] = []
    current = [track[0]]
    for prev, cur in zip(track, track[1:]):
        gap_min = minutes_between(prev.timestamp, cur.timestamp)
        jump_km = fix_distance_km(prev, cur)
        if should_split(gap_min, jump_km, params):
            runs.append(current)
            current = [cur]
        else:
            current.append(cur)
    runs.append(current)
    return runs


def segment_track(device_id: str, fixes: Sequence[Fix], params: SplitParams | None = None) -> list[Trip]:
    """Sort, split and number one device's fixes.

    Runs with fewer than two fixes cannot form a line and are dropped. Kept
    runs are numbered 1..n in chronological order with no gaps.
    """

    params = params or SplitParams()
    trips: list[Trip] = []
    for run in split_track(sort_track(fixes), params):
        if len(run) < 2:
            continue
        trips.append(Trip(device_id=device_id, number=len(trips) + 1, fixes=tuple(run)))
    return trips
