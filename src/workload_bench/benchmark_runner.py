#!/usr/bin/env python3
"""
Benchmark runner.

Turns parsed command-line arguments into a BenchmarkContext, runs the
driver and maps fatal errors to the process exit status.
"""

import sys

from .benchmark_context import BenchmarkContext
from .benchmark_driver import BenchmarkDriver
from .build_step import BuildStep
from .errors import HarnessError
from .phase_schema import select_phases
from .workload_executor import SubprocessExecutor, WorkloadExecutor


def create_context(args, executor: WorkloadExecutor | None = None) -> BenchmarkContext:
    """Build the run context from parsed arguments."""
    build_step = None
    if not args.no_build and args.build_command.strip():
        build_step = BuildStep(command=args.build_command, cwd=args.build_dir or None)

    return BenchmarkContext(
        output_dir=args.output_dir,
        phases=select_phases(args.phases),
        build_step=build_step,
        executor=executor or SubprocessExecutor(),
        quiet=args.quiet,
    )


def run_benchmarks(args, executor: WorkloadExecutor | None = None) -> int:
    """
    Execute the benchmark campaign described by the arguments.

    Returns the process exit status: 0 on completion, even when some
    iterations failed, and 1 on any fatal error.
    """
    try:
        context = create_context(args, executor)
        BenchmarkDriver(context).run(args.iterations, args.workload, [args.model_path, args.image_path])
    except HarnessError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n⚠️  Benchmark interrupted by user", file=sys.stderr)
        return 1

    if context.iterations_failed:
        print(f"\n⚠️  {context.iterations_failed} of {context.iterations_requested} iterations failed")
    print(f"\n✅ Wrote {context.rows_written} rows to {context.output_dir}")
    if not args.quiet:
        for path in context.output_files:
            print(f"   {path}")
    return 0
