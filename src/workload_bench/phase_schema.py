#!/usr/bin/env python3
"""
Phase and field schema for workload output.

The workload prints one block per measured phase:

    ============= Inference Metrics =============
    Wall Clock Time: 12.345ms
    User time: 10.2ms
    System time: 1.1ms
    Max RSS: 20480 bytes
    CPU Usage: 91.5%
    =======================================

Markers, labels and the terminator below must match that text exactly.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import UsageError

BLOCK_TERMINATOR = "======================================="


class FieldKind(Enum):
    """Canonical unit family of a measured field."""

    TIME = "time"
    PERCENT = "percent"
    MEMORY = "memory"


@dataclass(frozen=True)
class FieldSpec:
    """A labelled measurement line inside a phase block."""

    name: str  # MetricRecord attribute
    label: str
    kind: FieldKind


@dataclass(frozen=True)
class PhaseSpec:
    """A named phase, recognised by its marker line."""

    name: str

    @property
    def marker(self) -> str:
        return f"============= {self.name} Metrics ============="

    @property
    def csv_filename(self) -> str:
        """File name for this phase's CSV output, e.g. 'red_box_phase.csv'."""
        slug = re.sub(r"[^a-z0-9]+", "_", self.name.lower()).strip("_")
        return f"{slug}.csv"


DEFAULT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("wall_clock", "Wall Clock Time:", FieldKind.TIME),
    FieldSpec("user_time", "User time:", FieldKind.TIME),
    FieldSpec("system_time", "System time:", FieldKind.TIME),
    FieldSpec("cpu_usage", "CPU Usage:", FieldKind.PERCENT),
    FieldSpec("max_rss", "Max RSS:", FieldKind.MEMORY),
)

DEFAULT_PHASES: tuple[PhaseSpec, ...] = (
    PhaseSpec("envload"),
    PhaseSpec("loadmodel"),
    PhaseSpec("readimg"),
    PhaseSpec("Pre-processing"),
    PhaseSpec("Inference"),
    PhaseSpec("Post-processing"),
    PhaseSpec("RED BOX Phase"),
    PhaseSpec("GREEN BOX Phase"),
    PhaseSpec("Total"),
)


def get_available_phases() -> list[str]:
    """Get list of recognised phase names."""
    return [phase.name for phase in DEFAULT_PHASES]


def select_phases(names: list[str] | None) -> tuple[PhaseSpec, ...]:
    """Restrict the default phases to the given names, keeping output order."""
    if not names:
        return DEFAULT_PHASES

    unknown = [name for name in names if name not in get_available_phases()]
    if unknown:
        raise UsageError(f"Unknown phase(s): {', '.join(unknown)}. Available: {', '.join(get_available_phases())}")
    return tuple(phase for phase in DEFAULT_PHASES if phase.name in names)
