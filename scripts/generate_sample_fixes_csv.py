from __future__ import annotations

import argparse
import csv
import random
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Depot:
    name: str
    lat: float
    lon: float


def _iso(dt: datetime) -> str:
    return dt.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def generate_fixes(
    *,
    devices: int,
    rows_per_device: int,
    seed: int,
    start: datetime,
    depots: list[Depot],
) -> list[list[str]]:
    """Generate device,lat,lon,timestamp rows with drives, parking gaps and teleports."""

    rng = random.Random(seed)
    start = start.replace(tzinfo=UTC)
    out: list[list[str]] = []

    for d in range(devices):
        device_id = f"truck-{d + 1:02d}"
        depot = rng.choice(depots)
        lat, lon = depot.lat, depot.lon
        cur = start + timedelta(minutes=rng.uniform(0, 30))
        heading_lat = rng.uniform(-1, 1)
        heading_lon = rng.uniform(-1, 1)

        for _ in range(rows_per_device):
            r = rng.random()
            if r < 0.04:
                # Parked: long silence, then resume nearby
                cur = cur + timedelta(minutes=rng.uniform(30, 120))
            elif r < 0.06:
                # Relocated to another depot (distance jump)
                depot = rng.choice(depots)
                lat, lon = depot.lat, depot.lon
                cur = cur + timedelta(seconds=rng.uniform(30, 90))
            else:
                cur = cur + timedelta(seconds=rng.uniform(15, 120))
                # ~30-60 km/h in small steps
                lat += heading_lat * rng.uniform(0.0005, 0.002)
                lon += heading_lon * rng.uniform(0.0005, 0.002)
                if rng.random() < 0.1:
                    heading_lat = rng.uniform(-1, 1)
                    heading_lon = rng.uniform(-1, 1)
            out.append([device_id, f"{lat:.6f}", f"{lon:.6f}", _iso(cur)])

    # Interleave devices and shuffle a little so the tool has to sort
    rng.shuffle(out)

    # A handful of malformed rows, one per reject reason
    out.insert(rng.randrange(len(out)), ["truck-99", "12.5"])
    out.insert(rng.randrange(len(out)), ["", "48.1", "11.5", _iso(start)])
    out.insert(rng.randrange(len(out)), ["truck-01", "91", "11.5", _iso(start)])
    out.insert(rng.randrange(len(out)), ["truck-01", "48.1", "11.5", "yesterday-ish"])
    return out


def main() -> int:
    p = argparse.ArgumentParser(description="Generate a fake fixes CSV for demo/testing.")
    p.add_argument("--out", type=str, default="sample_data/fixes.csv", help="Output CSV path")
    p.add_argument("--devices", type=int, default=3, help="Number of devices")
    p.add_argument("--rows", type=int, default=300, help="Rows per device")
    p.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    p.add_argument("--start", type=str, default="2025-08-14 06:00:00", help="Start time (UTC)")
    p.add_argument("--no-header", action="store_true", help="Omit the header line")
    args = p.parse_args()

    depots = [
        Depot("munich", 48.1372000, 11.5756000),
        Depot("augsburg", 48.3705000, 10.8978000),
        Depot("ingolstadt", 48.7665000, 11.4258000),
    ]
    rows = generate_fixes(
        devices=args.devices,
        rows_per_device=args.rows,
        seed=args.seed,
        start=datetime.fromisoformat(args.start),
        depots=depots,
    )

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        if not args.no_header:
            w.writerow(["device_id", "lat", "lon", "timestamp"])
        w.writerows(rows)

    print(f"Generated: {out_path} (rows={len(rows)}, seed={args.seed})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
