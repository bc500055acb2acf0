"""Command-line interface for trip_splitter.

Run:
    python -m trip_splitter split input.csv output.geojson
    python -m trip_splitter inspect input.csv
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from dataclasses import asdict

from trip_splitter.csv_io import load_rows
from trip_splitter.inspect import inspect_rows
from trip_splitter.models import SplitParams
from trip_splitter.pipeline import PipelineError, default_rejects_path, process_file

_DEFAULTS = SplitParams()


def _cmd_split(args: argparse.Namespace) -> int:
    rejects_path = args.rejects if args.rejects is not None else default_rejects_path(args.output)
    params = SplitParams(max_gap_minutes=args.max_gap_minutes, max_jump_km=args.max_jump_km)
    try:
        result = process_file(args.input, args.output, rejects_path=rejects_path, params=params, indent=args.indent)
    except PipelineError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"OK: wrote {result.trip_count} trips to {args.output}")
    print(f"Rejects logged to {rejects_path}")
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    try:
        rows = load_rows(args.input)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        print(f"Cannot read input: {args.input} ({exc})", file=sys.stderr)
        return 1
    res = inspect_rows(rows)

    print("### Rows")
    print(f"data_rows={res.rows_total}, header_skipped={res.header_skipped}, fixes={res.fixes_accepted}")
    print()

    print("### Rejects")
    if res.rejects_by_reason:
        for reason, count in res.rejects_by_reason.items():
            print(f"{reason}={count}")
    else:
        print("none")
    print()

    for dev in res.devices:
        print(f"### Device {dev.device_id}")
        print(f"fixes={dev.fixes}, duplicates={dev.duplicate_timestamps}, out_of_order={dev.out_of_order}")
        print(f"start={dev.first_time.isoformat()}, end={dev.last_time.isoformat()}")
        print(f"lat=[{dev.min_lat}, {dev.max_lat}], lon=[{dev.min_lon}, {dev.max_lon}]")
        if dev.delta is not None:
            print(
                f"interval_s: count={dev.delta.count}, min={dev.delta.min_s:.3f}, "
                f"median={dev.delta.median_s:.3f}, p95={dev.delta.p95_s:.3f}, max={dev.delta.max_s:.3f}"
            )
        print()

    if args.json:
        print(json.dumps(asdict(res), ensure_ascii=False, indent=2, default=str))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""

    p = argparse.ArgumentParser(prog="trip_splitter")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (stderr)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_split = sub.add_parser("split", help="Split GPS fixes into trips and export GeoJSON")
    p_split.add_argument("input", type=str, help="Input CSV: device_id,lat,lon,timestamp")
    p_split.add_argument("output", type=str, help="Output GeoJSON path")
    p_split.add_argument(
        "--rejects",
        type=str,
        default=None,
        help="Rejects log path (default: rejects.log next to the output)",
    )
    p_split.add_argument(
        "--max-gap-minutes",
        type=float,
        default=_DEFAULTS.max_gap_minutes,
        help="Start a new trip when consecutive fixes are more than this many minutes apart",
    )
    p_split.add_argument(
        "--max-jump-km",
        type=float,
        default=_DEFAULTS.max_jump_km,
        help="Start a new trip when consecutive fixes are more than this many km apart",
    )
    p_split.add_argument("--indent", type=int, default=None, help="Pretty-print GeoJSON with this indent")
    p_split.set_defaults(func=_cmd_split)

    p_ins = sub.add_parser("inspect", help="Summarize an input CSV: rejects, devices, sampling intervals")
    p_ins.add_argument("input", type=str, help="Input CSV path")
    p_ins.add_argument("--json", action="store_true", help="Also print the summary as JSON")
    p_ins.set_defaults(func=_cmd_inspect)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
