from __future__ import annotations

import io
from pathlib import Path

import streamlit as st

from trip_splitter.csv_io import RejectLog, load_rows
from trip_splitter.export import dumps_geojson
from trip_splitter.models import RejectRecord, SplitParams
from trip_splitter.pipeline import PipelineResult, run_pipeline


def _hhmm(minutes: float) -> str:
    m = int(round(max(0.0, minutes)))
    return f"{m // 60:02d}:{m % 60:02d}"


def _rejects_csv(rejects: list[RejectRecord]) -> str:
    buffer = io.StringIO()
    with RejectLog(stream=buffer) as log:
        for r in rejects:
            log.write(r)
    return buffer.getvalue()


@st.cache_data(show_spinner=False)
def _run(input_csv: str, max_gap_minutes: float, max_jump_km: float, mtime: float) -> PipelineResult:
    _ = mtime  # part of cache key so updated files reload automatically
    params = SplitParams(max_gap_minutes=max_gap_minutes, max_jump_km=max_jump_km)
    return run_pipeline(load_rows(input_csv), params=params)


def main() -> None:
    st.set_page_config(page_title="Trip splitter", layout="wide")
    st.title("GPS trips by device")

    defaults = SplitParams()
    with st.sidebar:
        st.subheader("Input")
        input_csv = st.text_input("CSV path (device_id,lat,lon,timestamp)", value="sample_data/fixes.csv")

        st.subheader("Split rule")
        max_gap_minutes = st.number_input("max gap (minutes)", value=defaults.max_gap_minutes, step=5.0)
        max_jump_km = st.number_input("max jump (km)", value=defaults.max_jump_km, step=0.5)
        indent = st.number_input("GeoJSON indent (0 = compact)", value=0, min_value=0, max_value=8)

    p = Path(input_csv)
    if not p.exists():
        st.error(f"File not found: {input_csv!r}")
        return

    try:
        result = _run(input_csv, float(max_gap_minutes), float(max_jump_km), p.stat().st_mtime)
    except Exception as exc:
        st.exception(exc)
        return

    ingest = result.ingest
    st.subheader("Summary")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Devices", str(len(ingest.fixes_by_device)))
    c2.metric("Valid fixes", str(ingest.fix_count))
    c3.metric("Rejected rows", str(result.reject_count))
    c4.metric("Trips", str(result.trip_count))

    rows: list[dict[str, object]] = []
    for feature in result.document["features"]:
        props = feature["properties"]
        rows.append(
            {
                "device_id": props["device_id"],
                "trip_id": props["trip_id"],
                "points": props["point_count"],
                "distance_km": props["distance_km"],
                "duration": _hhmm(props["duration_min"]),
                "avg_speed_kmh": props["avg_speed_kmh"],
                "max_speed_kmh": props["max_speed_kmh"],
                "color": props["stroke"],
            }
        )

    st.subheader("Trips")
    st.dataframe(rows, use_container_width=True, height=420)

    trip_fixes = [f for trip, _ in result.trips for f in trip.fixes]
    if trip_fixes:
        st.subheader("Fixes on exported trips")
        st.map(
            {"lat": [f.latitude for f in trip_fixes], "lon": [f.longitude for f in trip_fixes]},
            use_container_width=True,
        )

    with st.expander(f"Rejected rows ({result.reject_count})", expanded=False):
        st.dataframe(
            [{"reason": r.reason, "line": r.line} for r in ingest.rejects],
            use_container_width=True,
            height=300,
        )

    d1, d2 = st.columns(2)
    d1.download_button(
        "Download trips.geojson",
        data=dumps_geojson(result.document, indent=int(indent) or None),
        file_name="trips.geojson",
        mime="application/geo+json",
    )
    d2.download_button(
        "Download rejects.log",
        data=_rejects_csv(ingest.rejects),
        file_name="rejects.log",
        mime="text/csv",
    )

    st.caption(
        "Trips split when consecutive fixes are more than the max gap apart in time or the max jump apart "
        "in distance. Runs with a single fix are not exported."
    )


if __name__ == "__main__":
    main()
