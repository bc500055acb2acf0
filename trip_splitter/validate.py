"""Row validation: numeric and coordinate checks, header detection."""

from __future__ import annotations

import math
import re
from typing import Sequence

from trip_splitter.models import HEADER_COLUMNS
from trip_splitter.timeutils import parse_timestamp

# Plain decimal or exponent notation, e.g. "12", "-0.5", ".5", "1e-3".
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: str | None) -> float | None:
    """Parse numeric text; None for anything that is not a finite number."""

    if value is None:
        return None
    s = value.strip()
    if not _NUMBER_RE.fullmatch(s):
        return None
    number = float(s)
    if not math.isfinite(number):
        return None
    return number


def is_valid_latitude(value: str | None) -> bool:
    lat = parse_number(value)
    return lat is not None and -90.0 <= lat <= 90.0


def is_valid_longitude(value: str | None) -> bool:
    lon = parse_number(value)
    return lon is not None and -180.0 <= lon <= 180.0


def is_header_row(fields: Sequence[str]) -> bool:
    """Decide whether the first row of an input is a header (or garbage) line.

    A row is treated as a header when any field names one of the expected
    columns, when it has fewer than four fields, or when fields 2-4 do not
    read as two numbers followed by a parseable timestamp. Coordinate ranges
    are not checked here, so an out-of-range first row is still data.
    """

    lowered = {str(v).strip().lower() for v in fields}
    if lowered.intersection(HEADER_COLUMNS):
        return True
    if len(fields) < 4:
        return True
    _, lat, lon, ts = fields[:4]
    numeric = parse_number(lat) is not None and parse_number(lon) is not None
    return not (numeric and parse_timestamp(ts) is not None)
