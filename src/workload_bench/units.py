#!/usr/bin/env python3
"""
Unit normalization for measurement values.

Converts the textual value after a field label into the field's canonical
unit: milliseconds for times, percent for CPU usage, a raw integer for memory.
"""

import re

from .phase_schema import FieldKind

_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(\S*)")

# Anything not listed in either table is already milliseconds.
MS_PER_UNIT: dict[str, float] = {
    "s": 1000.0,
    "sec": 1000.0,
    "secs": 1000.0,
    "second": 1000.0,
    "seconds": 1000.0,
}

UNITS_PER_MS: dict[str, float] = {
    "us": 1000.0,
    "µs": 1000.0,
    "μs": 1000.0,
    "usec": 1000.0,
    "microsecond": 1000.0,
    "microseconds": 1000.0,
    "ns": 1_000_000.0,
    "nsec": 1_000_000.0,
    "nanosecond": 1_000_000.0,
    "nanoseconds": 1_000_000.0,
}


def split_value(text: str) -> tuple[str, str] | None:
    """Split '1.5 s' or '1.5s' into ('1.5', 's'). Returns None if no number leads the text."""
    match = _NUMBER.match(text)
    if match is None:
        return None
    return match.group(1), match.group(2)


def normalize_time(text: str) -> float | None:
    """
    Convert a time value to milliseconds.

    An unrecognised or missing suffix leaves the value unchanged.
    """
    parts = split_value(text)
    if parts is None:
        return None
    number, suffix = parts
    value = float(number)
    suffix = suffix.lower()
    if suffix in MS_PER_UNIT:
        return value * MS_PER_UNIT[suffix]
    if suffix in UNITS_PER_MS:
        return value / UNITS_PER_MS[suffix]
    return value


def normalize_percent(text: str) -> float | None:
    parts = split_value(text)
    if parts is None:
        return None
    return float(parts[0])


def normalize_memory(text: str) -> int | None:
    """Parse a leading integer; any trailing unit word is ignored."""
    match = re.match(r"^\s*(\d+)(?![.\d])", text)
    if match is None:
        return None
    return int(match.group(1))


def normalize(text: str, kind: FieldKind) -> float | int | None:
    """Normalize a raw value according to its field kind."""
    if kind is FieldKind.TIME:
        return normalize_time(text)
    if kind is FieldKind.PERCENT:
        return normalize_percent(text)
    if kind is FieldKind.MEMORY:
        return normalize_memory(text)
    raise ValueError(f"Unknown field kind: {kind}")
