#!/usr/bin/env python3
"""
Workload benchmark harness - main entry point.

Usage: workload-bench <iterations> <model_path> <image_path> [options]
"""

import sys

from .benchmark_runner import run_benchmarks
from .cli_parser import create_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the benchmark harness."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_benchmarks(args)


if __name__ == "__main__":
    sys.exit(main())
