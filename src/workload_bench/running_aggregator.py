#!/usr/bin/env python3
"""
Running per-phase averages.

Keeps only a mean and a count per phase, so memory does not grow with the
number of iterations.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .metric_record import MetricRecord


@dataclass
class PhaseAverage:
    """Running mean of every MetricRecord field for one phase."""

    count: int = 0
    means: dict[str, float] = field(default_factory=lambda: dict.fromkeys(MetricRecord.field_names(), 0.0))

    def add(self, record: MetricRecord) -> None:
        """Fold one record into the mean."""
        self.count += 1
        n = self.count
        for name, old_avg in self.means.items():
            self.means[name] = (old_avg * (n - 1) + getattr(record, name)) / n

    def mean(self, name: str) -> float:
        """Get the running mean of a single field."""
        return self.means[name]


class RunningAggregator:
    """
    Per-phase running averages across all iterations seen so far.

    Phases are independent: a discarded block in one phase never touches
    another phase's state.
    """

    def __init__(self, phase_names: Iterable[str] = ()):
        self._averages: dict[str, PhaseAverage] = {}
        for name in phase_names:
            self._averages[name] = PhaseAverage()

    def update(self, phase: str, record: MetricRecord) -> PhaseAverage:
        """Fold a new record into the phase's running average."""
        average = self._averages.setdefault(phase, PhaseAverage())
        average.add(record)
        return average

    def get(self, phase: str) -> PhaseAverage:
        """Get the running average for a phase (zeroed if never updated)."""
        return self._averages.get(phase, PhaseAverage())

    def count(self, phase: str) -> int:
        return self.get(phase).count

    def phases(self) -> list[str]:
        return list(self._averages)

    def __iter__(self) -> Iterator[tuple[str, PhaseAverage]]:
        return iter(self._averages.items())
