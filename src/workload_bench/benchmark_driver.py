#!/usr/bin/env python3
"""
Benchmark iteration driver.

Runs the workload a fixed number of times, one after another, and threads
each run's output through the block parser, the running aggregator and the
per-phase CSV files.
"""

import os
from collections.abc import Sequence
from pathlib import Path

from .benchmark_context import BenchmarkContext
from .block_parser import scan_phases
from .csv_sink import PhaseSinks
from .errors import OutputError, WorkloadExecutionError, WorkloadNotFoundError


def is_runnable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


class BenchmarkDriver:
    """
    Executes a benchmark campaign for one context.

    Iterations run strictly one after another, each awaited to completion.
    """

    def __init__(self, context: BenchmarkContext):
        self.context = context

    def ensure_workload(self, workload_path: Path, workload_args: Sequence[str]) -> None:
        """
        Check the workload is runnable, building it once if it is missing.

        Raises BuildError or WorkloadNotFoundError.
        """
        ctx = self.context
        if not workload_path.exists() and ctx.build_step is not None:
            print(f"⚠️  Workload not found at {workload_path}, running build")
            # Workload arguments are <model_path> <image_path>
            model_path = workload_args[0] if len(workload_args) > 0 else ""
            image_path = workload_args[1] if len(workload_args) > 1 else ""
            ctx.build_step.run(ctx.executor, model_path, image_path)

        if not workload_path.exists():
            raise WorkloadNotFoundError(f"Workload executable does not exist: {workload_path}")
        if not is_runnable(workload_path):
            raise WorkloadNotFoundError(f"Workload is not an executable file: {workload_path}")

    def prepare_output_dir(self) -> None:
        """Create the output directory; an existing directory is fine."""
        try:
            self.context.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot create output directory {self.context.output_dir}: {e}") from e

    def run(self, iterations: int, workload_path: str | Path, workload_args: Sequence[str]) -> BenchmarkContext:
        """
        Execute the full campaign and return the populated context.

        Fatal problems (missing workload, failed build, unusable output
        directory) raise before any iteration runs. A failed iteration or a
        malformed block is reported and skipped.
        """
        if iterations <= 0:
            raise ValueError(f"Iterations must be a positive integer, got {iterations}")

        ctx = self.context
        workload_path = Path(workload_path)
        self.ensure_workload(workload_path, workload_args)
        self.prepare_output_dir()

        ctx.iterations_requested = iterations
        command = [str(workload_path), *workload_args]

        print(f"\n🚀 Running {workload_path.name} for {iterations} iterations")
        print("=" * 60)
        print(f"Command: {' '.join(command)}")
        print(f"Output: {ctx.output_dir}")

        with PhaseSinks(ctx.output_dir, ctx.phases) as sinks:
            ctx.output_files = sinks.paths()
            for i in range(1, iterations + 1):
                self.run_iteration(i, iterations, command, sinks)

        self.print_summary()
        return ctx

    def run_iteration(self, index: int, total: int, command: list[str], sinks: PhaseSinks) -> bool:
        """Run the workload once and record its phases. Returns False if the run failed."""
        ctx = self.context
        try:
            result = ctx.executor.execute(command)
        except WorkloadExecutionError as e:
            ctx.iterations_failed += 1
            print(f"❌ Iteration {index}/{total}: {e}")
            return False

        if not result.succeeded:
            ctx.iterations_failed += 1
            print(f"❌ Iteration {index}/{total}: workload exited with status {result.returncode}")
            for line in result.stderr_tail():
                print(f"    {line}")
            return False

        recorded = 0
        discarded: list[str] = []
        for phase, record in scan_phases(result.stdout.splitlines(), ctx.phases, ctx.fields, ctx.terminator):
            if record is None:
                discarded.append(phase.name)
                continue
            ctx.aggregator.update(phase.name, record)
            sinks.append(phase.name, record)
            recorded += 1

        ctx.iterations_succeeded += 1
        ctx.rows_written += recorded
        ctx.blocks_discarded += len(discarded)

        if not ctx.quiet:
            print(f"⚡ Iteration {index:2d}/{total}: {recorded} phase records")
        for name in discarded:
            print(f"⚠️  Iteration {index}/{total}: incomplete '{name}' block discarded")
        return True

    def print_summary(self) -> None:
        """Print the per-phase running averages."""
        ctx = self.context
        print(f"\n📊 PHASE AVERAGES ({ctx.iterations_succeeded}/{ctx.iterations_requested} iterations succeeded)")
        print("=" * 95)
        print(
            f"{'Phase':<18} {'Runs':>5} {'Wall (ms)':>12} {'User (ms)':>12} "
            f"{'System (ms)':>12} {'CPU (%)':>9} {'Max RSS':>12}"
        )
        print("-" * 95)
        for name, average in ctx.aggregator:
            if average.count == 0:
                print(f"{name:<18} {0:>5} {'-':>12} {'-':>12} {'-':>12} {'-':>9} {'-':>12}")
                continue
            print(
                f"{name:<18} {average.count:>5} "
                f"{average.mean('wall_clock'):>12.3f} "
                f"{average.mean('user_time'):>12.3f} "
                f"{average.mean('system_time'):>12.3f} "
                f"{average.mean('cpu_usage'):>9.2f} "
                f"{average.mean('max_rss'):>12.0f}"
            )
