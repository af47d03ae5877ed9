#!/usr/bin/env python3
"""
Command-line interface parser for the benchmark harness.

Defines and parses all command-line arguments for a benchmark campaign.
"""

import argparse
import sys
from pathlib import Path

from .config import settings
from .phase_schema import get_available_phases


class HarnessArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Number of iterations must be a positive integer, got '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Number of iterations must be a positive integer, got {number}")
    return number


def non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("Model path or image path cannot be empty")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = HarnessArgumentParser(
        prog="workload-bench",
        description="Repeated workload benchmark with per-phase CSV output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Run the workload 100 times
  workload-bench 100 models/resnet50.onnx images/cat.jpg

  # Only record inference and total, into a custom directory
  workload-bench 20 models/resnet50.onnx images/cat.jpg \\
    --phases Inference Total --output-dir results/host-a

Recognised phases:
  {", ".join(get_available_phases())}
""",
    )

    # Campaign
    parser.add_argument("iterations", type=positive_int, help="Number of workload runs")
    parser.add_argument("model_path", type=non_empty, help="Model path passed to the workload")
    parser.add_argument("image_path", type=non_empty, help="Image path passed to the workload")

    # Workload and build
    parser.add_argument(
        "--workload", type=Path, default=Path(settings.workload_path),
        help=f"Workload executable (default: {settings.workload_path})",
    )
    parser.add_argument(
        "--build-command", default=settings.build_command,
        help=f"Command that builds a missing workload (default: '{settings.build_command}')",
    )
    parser.add_argument(
        "--build-dir", default=settings.build_dir,
        help=f"Directory to run the build command in (default: {settings.build_dir})",
    )
    parser.add_argument("--no-build", action="store_true", help="Never build; fail if the workload is missing")

    # Output
    parser.add_argument(
        "--output-dir", type=Path, default=Path(settings.output_dir),
        help=f"Directory for per-phase CSV files (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--phases", nargs="+", choices=get_available_phases(), metavar="PHASE",
        help="Only record these phases (default: all)",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress per-iteration progress lines")

    return parser
