"""CSV input/output: reading fix rows and writing the rejects log."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from types import TracebackType
from typing import Iterator, TextIO

from trip_splitter.models import RejectRecord

logger = logging.getLogger(__name__)


def iter_rows(csv_path: str | Path) -> Iterator[list[str]]:
    """Yield trimmed field lists from a comma-separated file.

    Args:
        csv_path: Path to the input CSV. A UTF-8 BOM is tolerated; undecodable
            bytes become U+FFFD so the row is validated like any other.

    Yields:
        One list of fields per record. Blank lines yield an empty list.
    """

    p = Path(csv_path)
    with p.open("r", encoding="utf-8-sig", errors="replace", newline="") as f:
        reader = csv.reader(f)
        for row in reader:
            yield [v.strip() for v in row]


def load_rows(csv_path: str | Path) -> list[list[str]]:
    """Read all rows into memory."""

    rows = list(iter_rows(csv_path))
    logger.info("Read %s rows from %s", len(rows), csv_path)
    return rows


class RejectLog:
    """Append-only CSV sink for rejected rows, with a ``reason,line`` header.

    Usable as a context manager; also callable so it can be handed to
    ``ingest_rows`` as the reject sink. Writes to ``path``, or to an already
    open text ``stream`` which is left open on close.
    """

    def __init__(self, path: str | Path | None = None, stream: TextIO | None = None) -> None:
        if (path is None) == (stream is None):
            raise ValueError("RejectLog needs exactly one of path or stream")
        self._path = Path(path) if path is not None else None
        self._stream = stream
        self._file: TextIO | None = None
        self._writer = None
        self.count = 0

    @property
    def path(self) -> Path | None:
        return self._path

    def open(self) -> None:
        """Create (truncate) the log and write its header. Raises OSError on failure."""

        if self._stream is not None:
            target = self._stream
        else:
            self._file = target = self._path.open("w", encoding="utf-8", newline="")
        self._writer = csv.writer(target, lineterminator="\n")
        self._writer.writerow(["reason", "line"])

    def write(self, record: RejectRecord) -> None:
        if self._writer is None:
            raise RuntimeError(f"Reject log {self._path or self._stream} is not open")
        self._writer.writerow([record.reason, record.line])
        self.count += 1

    __call__ = write

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self._writer = None

    def __enter__(self) -> RejectLog:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
