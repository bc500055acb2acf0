"""Module entry point: python -m trip_splitter ..."""

from __future__ import annotations

from trip_splitter.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
