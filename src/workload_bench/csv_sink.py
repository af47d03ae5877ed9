#!/usr/bin/env python3
"""
CSV output for per-iteration phase records.

One file per phase, truncated at start, with one row per valid record.
"""

import contextlib
import csv
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .errors import OutputError
from .metric_record import MetricRecord
from .phase_schema import PhaseSpec

CSV_HEADER = ["user_time", "system_time", "cpu_percent", "wallclock_time", "max_rss"]


def format_row(record: MetricRecord) -> list[str]:
    """Format a record as CSV cells: times to 3 decimals, CPU to 2 decimals with '%'."""
    return [
        f"{record.user_time:.3f}",
        f"{record.system_time:.3f}",
        f"{record.cpu_usage:.2f}%",
        f"{record.wall_clock:.3f}",
        f"{int(record.max_rss):d}",
    ]


class CsvSink:
    """Writes the header on creation and one row per appended record."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.rows_written = 0
        self._writer = csv.writer(stream, lineterminator="\n")
        self._writer.writerow(CSV_HEADER)
        self.stream.flush()

    def append(self, record: MetricRecord) -> None:
        """Append one record and flush it to disk."""
        self._writer.writerow(format_row(record))
        self.stream.flush()
        self.rows_written += 1


class PhaseSinks(contextlib.AbstractContextManager):
    """
    Owns one open CSV file per phase for the whole run.

    Use as a context manager; every file is closed on exit, including when
    opening a later file fails.
    """

    def __init__(self, output_dir: Path, phases: Iterable[PhaseSpec]):
        self.output_dir = Path(output_dir)
        self.phases = tuple(phases)
        self.sinks: dict[str, CsvSink] = {}
        self._stack = contextlib.ExitStack()

    def __enter__(self) -> "PhaseSinks":
        try:
            for phase in self.phases:
                path = self.output_dir / phase.csv_filename
                try:
                    stream = self._stack.enter_context(open(path, "w", newline="", encoding="utf-8"))
                except OSError as e:
                    raise OutputError(f"Cannot open output file {path}: {e}") from e
                self.sinks[phase.name] = CsvSink(stream)
        except BaseException:
            self._stack.close()
            raise
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self._stack.close()

    def append(self, phase: str, record: MetricRecord) -> None:
        self.sinks[phase].append(record)

    def paths(self) -> list[Path]:
        """Get the output file paths in phase order."""
        return [self.output_dir / phase.csv_filename for phase in self.phases]
