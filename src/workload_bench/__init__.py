#!/usr/bin/env python3
"""
Benchmark harness for externally built inference workloads.

Runs a workload repeatedly, parses its per-phase timing blocks, keeps
running averages and writes one CSV file per phase.
"""

from .benchmark_context import BenchmarkContext
from .benchmark_driver import BenchmarkDriver
from .benchmark_runner import create_context, run_benchmarks
from .block_parser import parse_block, scan_phases
from .build_step import BuildStep
from .cli_parser import create_parser
from .csv_sink import CSV_HEADER, CsvSink, PhaseSinks, format_row
from .errors import (
    BuildError,
    HarnessError,
    OutputError,
    UsageError,
    WorkloadExecutionError,
    WorkloadNotFoundError,
)
from .metric_record import MetricRecord
from .phase_schema import DEFAULT_FIELDS, DEFAULT_PHASES, FieldKind, FieldSpec, PhaseSpec
from .running_aggregator import PhaseAverage, RunningAggregator
from .units import normalize
from .workload_executor import CommandResult, SubprocessExecutor, WorkloadExecutor

__all__ = [
    "CSV_HEADER",
    "DEFAULT_FIELDS",
    "DEFAULT_PHASES",
    "BenchmarkContext",
    "BenchmarkDriver",
    "BuildError",
    "BuildStep",
    "CommandResult",
    "CsvSink",
    "FieldKind",
    "FieldSpec",
    "HarnessError",
    "MetricRecord",
    "OutputError",
    "PhaseAverage",
    "PhaseSinks",
    "PhaseSpec",
    "RunningAggregator",
    "SubprocessExecutor",
    "UsageError",
    "WorkloadExecutionError",
    "WorkloadExecutor",
    "WorkloadNotFoundError",
    "create_context",
    "create_parser",
    "format_row",
    "normalize",
    "parse_block",
    "run_benchmarks",
    "scan_phases",
]
