#!/usr/bin/env python3
"""
Benchmark run context.

Defines the BenchmarkContext class that carries all per-run state through
the driver: configuration, the executor, running averages and counters.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .build_step import BuildStep
from .phase_schema import BLOCK_TERMINATOR, DEFAULT_FIELDS, DEFAULT_PHASES, FieldSpec, PhaseSpec
from .running_aggregator import RunningAggregator
from .workload_executor import SubprocessExecutor, WorkloadExecutor


@dataclass
class BenchmarkContext:
    """
    Configuration and execution state for one benchmark campaign.

    The aggregator and counters are populated by BenchmarkDriver.run().
    """

    output_dir: Path
    phases: tuple[PhaseSpec, ...] = DEFAULT_PHASES
    fields: tuple[FieldSpec, ...] = DEFAULT_FIELDS
    terminator: str = BLOCK_TERMINATOR
    build_step: BuildStep | None = None
    executor: WorkloadExecutor = field(default_factory=SubprocessExecutor)
    quiet: bool = False

    # Populated during execution
    aggregator: RunningAggregator = field(init=False)
    iterations_requested: int = 0
    iterations_succeeded: int = 0
    iterations_failed: int = 0
    rows_written: int = 0
    blocks_discarded: int = 0
    output_files: list[Path] = field(default_factory=list)

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)
        self.aggregator = RunningAggregator(phase.name for phase in self.phases)

    def to_dict(self) -> dict[str, Any]:
        """Convert the campaign outcome to a dictionary for reporting."""
        return {
            "output_dir": str(self.output_dir),
            "phases": self.aggregator.phases(),
            "output_files": [str(path) for path in self.output_files],
            "iterations_requested": self.iterations_requested,
            "iterations_succeeded": self.iterations_succeeded,
            "iterations_failed": self.iterations_failed,
            "rows_written": self.rows_written,
            "blocks_discarded": self.blocks_discarded,
            "averages": {
                name: {"count": average.count, **average.means} for name, average in self.aggregator
            },
        }
