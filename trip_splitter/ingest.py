"""Classify raw CSV rows into validated fixes and rejects."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from trip_splitter.models import (
    REASON_BAD_TIMESTAMP,
    REASON_EMPTY_DEVICE_ID,
    REASON_INVALID_COORDINATES,
    REASON_TOO_FEW_COLUMNS,
    REJECT_LINE_SEPARATOR,
    Fix,
    RejectRecord,
)
from trip_splitter.timeutils import parse_timestamp
from trip_splitter.validate import is_header_row, is_valid_latitude, is_valid_longitude, parse_number

logger = logging.getLogger(__name__)

RejectSink = Callable[[RejectRecord], None]


@dataclass(slots=True)
class IngestResult:
    """Outcome of classifying every row of one input.

    ``fixes_by_device`` keeps devices in the order they were first seen and
    each device's fixes in file order.
    """

    fixes_by_device: dict[str, list[Fix]] = field(default_factory=dict)
    rejects: list[RejectRecord] = field(default_factory=list)
    rows_total: int = 0
    header_skipped: bool = False

    @property
    def fix_count(self) -> int:
        return sum(len(v) for v in self.fixes_by_device.values())

    def reject_counts(self) -> dict[str, int]:
        return dict(Counter(r.reason for r in self.rejects))


def classify_row(fields: Sequence[str]) -> Fix | RejectRecord:
    """Turn one data row into a Fix, or a RejectRecord naming the first failed check."""

    def reject(reason: str) -> RejectRecord:
        return RejectRecord(reason=reason, line=REJECT_LINE_SEPARATOR.join(fields))

    if len(fields) < 4:
        return reject(REASON_TOO_FEW_COLUMNS)
    device_id, lat, lon, ts = fields[:4]

    if not device_id:
        return reject(REASON_EMPTY_DEVICE_ID)
    if not is_valid_latitude(lat) or not is_valid_longitude(lon):
        return reject(REASON_INVALID_COORDINATES)
    dt = parse_timestamp(ts)
    if dt is None:
        return reject(REASON_BAD_TIMESTAMP)

    return Fix(
        device_id=device_id,
        latitude=parse_number(lat),
        longitude=parse_number(lon),
        timestamp=dt,
        timestamp_text=ts,
    )


def ingest_rows(rows: Iterable[Sequence[str]], on_reject: RejectSink | None = None) -> IngestResult:
    """Validate rows in file order and group accepted fixes by device.

    Args:
        rows: Field lists, already trimmed. Empty lists (blank lines) are skipped.
        on_reject: Optional sink called once per rejected row, in encounter order.

    Returns:
        IngestResult with fixes grouped by device and all rejects.

    Notes:
        Only the first non-blank row is checked for being a header. A header
        is dropped silently; every later row yields exactly one fix or reject.
    """

    result = IngestResult()
    first = True
    for fields in rows:
        if not fields:
            continue
        if first:
            first = False
            if is_header_row(fields):
                result.header_skipped = True
                logger.debug("Skipping header row: %s", fields)
                continue

        result.rows_total += 1
        outcome = classify_row(fields)
        if isinstance(outcome, RejectRecord):
            logger.debug("Rejected row (%s): %s", outcome.reason, outcome.line)
            result.rejects.append(outcome)
            if on_reject is not None:
                on_reject(outcome)
            continue
        result.fixes_by_device.setdefault(outcome.device_id, []).append(outcome)

    if result.rejects:
        logger.warning("%s of %s rows rejected: %s", len(result.rejects), result.rows_total, result.reject_counts())
    return result
