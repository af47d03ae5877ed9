#!/usr/bin/env python3
"""
Phase block parser.

Scans captured workload output for phase marker lines and extracts one
MetricRecord per complete block. Incomplete blocks are discarded without
affecting the rest of the scan.
"""

from collections.abc import Iterable, Iterator

from .metric_record import MetricRecord
from .phase_schema import BLOCK_TERMINATOR, DEFAULT_FIELDS, DEFAULT_PHASES, FieldSpec, PhaseSpec
from .units import normalize


class LineStream:
    """Line iterator that can give back one line for the next reader."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self._pushed: list[str] = []

    def __iter__(self) -> "LineStream":
        return self

    def __next__(self) -> str:
        if self._pushed:
            return self._pushed.pop()
        return next(self._lines)

    def push_back(self, line: str) -> None:
        self._pushed.append(line)


def match_phase(line: str, phases: Iterable[PhaseSpec]) -> PhaseSpec | None:
    """Return the phase whose marker appears in the line, if any."""
    for phase in phases:
        if phase.marker in line:
            return phase
    return None


def parse_block(
    lines: Iterable[str],
    fields: Iterable[FieldSpec] = DEFAULT_FIELDS,
    terminator: str = BLOCK_TERMINATOR,
    phases: Iterable[PhaseSpec] = DEFAULT_PHASES,
) -> MetricRecord | None:
    """
    Parse the lines following a phase marker into a MetricRecord.

    Consumes lines until every field has been matched, the terminator line
    is reached, or the stream ends. A line carrying another phase marker
    also ends the block; when lines is a LineStream that line is pushed
    back for the caller. Fields may appear in any order and a repeated
    label overwrites the earlier value.

    Returns None unless all fields were found.
    """
    fields = tuple(fields)
    phases = tuple(phases)
    stream = lines if isinstance(lines, LineStream) else LineStream(lines)
    found: dict[str, float | int] = {}

    for line in stream:
        if line.strip() == terminator:
            break
        if match_phase(line, phases) is not None:
            stream.push_back(line)
            break

        for field_spec in fields:
            position = line.find(field_spec.label)
            if position < 0:
                continue
            value = normalize(line[position + len(field_spec.label):], field_spec.kind)
            if value is not None:
                found[field_spec.name] = value
            break

        if len(found) == len(fields):
            break

    if len(found) != len(fields):
        return None
    return MetricRecord(**found)


def scan_phases(
    lines: Iterable[str],
    phases: Iterable[PhaseSpec] = DEFAULT_PHASES,
    fields: Iterable[FieldSpec] = DEFAULT_FIELDS,
    terminator: str = BLOCK_TERMINATOR,
) -> Iterator[tuple[PhaseSpec, MetricRecord | None]]:
    """
    Walk workload output and yield (phase, record) for every marker found.

    The record is None when the block was incomplete.
    """
    phases = tuple(phases)
    fields = tuple(fields)
    # Any known marker ends a block, selected or not
    boundaries = tuple(dict.fromkeys((*phases, *DEFAULT_PHASES)))
    stream = LineStream(lines)

    for line in stream:
        phase = match_phase(line, phases)
        if phase is None:
            continue
        yield phase, parse_block(stream, fields, terminator, boundaries)
