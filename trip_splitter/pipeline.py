"""End-to-end run: rows -> fixes -> trips -> metrics -> GeoJSON document."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from trip_splitter.csv_io import RejectLog, load_rows
from trip_splitter.export import build_features, dumps_geojson, feature_collection
from trip_splitter.ingest import IngestResult, RejectSink, ingest_rows
from trip_splitter.metrics import compute_metrics
from trip_splitter.models import SplitParams, Trip, TripMetrics
from trip_splitter.segment import segment_track

logger = logging.getLogger(__name__)

REJECTS_FILENAME = "rejects.log"


class PipelineError(RuntimeError):
    """A run-level failure (unreadable input, unwritable output, serialization)."""


@dataclass(slots=True)
class PipelineResult:
    ingest: IngestResult
    trips: list[tuple[Trip, TripMetrics]] = field(default_factory=list)
    document: dict[str, Any] = field(default_factory=dict)

    @property
    def trip_count(self) -> int:
        return len(self.trips)

    @property
    def reject_count(self) -> int:
        return len(self.ingest.rejects)


def run_pipeline(
    rows: Iterable[Sequence[str]],
    params: SplitParams | None = None,
    on_reject: RejectSink | None = None,
) -> PipelineResult:
    """Run the whole in-memory pipeline over raw rows.

    Devices are processed in the order they first appear in the input; the
    color counter runs across all devices in that order.
    """

    params = params or SplitParams()
    ingest = ingest_rows(rows, on_reject=on_reject)

    result = PipelineResult(ingest=ingest)
    features: list[dict[str, Any]] = []
    color_index = 0
    for device_id, fixes in ingest.fixes_by_device.items():
        device_trips = [(t, compute_metrics(t.fixes)) for t in segment_track(device_id, fixes, params)]
        logger.debug("Device %s: %s fixes, %s trips", device_id, len(fixes), len(device_trips))
        device_features, color_index = build_features(device_trips, color_index)
        features.extend(device_features)
        result.trips.extend(device_trips)

    result.document = feature_collection(features)
    logger.info("Exported %s trips from %s fixes", result.trip_count, ingest.fix_count)
    return result


def default_rejects_path(output_path: str | Path) -> Path:
    """The rejects log lives next to the output document."""

    return Path(output_path).parent / REJECTS_FILENAME


def process_file(
    input_path: str | Path,
    output_path: str | Path,
    rejects_path: str | Path | None = None,
    params: SplitParams | None = None,
    indent: int | None = None,
) -> PipelineResult:
    """Read a CSV, write the rejects log and the GeoJSON document.

    Raises:
        PipelineError: If the input cannot be read, the rejects log cannot be
            opened, or the document cannot be serialized or written. No
            output document is written when serialization fails.
    """

    src = Path(input_path)
    if not src.is_file():
        raise PipelineError(f"Cannot read input: {src}")

    reject_log = RejectLog(rejects_path if rejects_path is not None else default_rejects_path(output_path))
    try:
        reject_log.open()
    except OSError as exc:
        raise PipelineError(f"Failed to open rejects log {reject_log.path}: {exc}") from exc

    try:
        try:
            rows = load_rows(src)
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise PipelineError(f"Failed to read input {src}: {exc}") from exc
        result = run_pipeline(rows, params=params, on_reject=reject_log)
    finally:
        reject_log.close()

    try:
        text = dumps_geojson(result.document, indent=indent)
    except (TypeError, ValueError) as exc:
        raise PipelineError(f"Failed to encode GeoJSON: {exc}") from exc
    try:
        Path(output_path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PipelineError(f"Failed to write {output_path}: {exc}") from exc
    return result
