#!/usr/bin/env python3
"""
Harness settings.

Defaults can be overridden through environment variables; command-line
flags take precedence over both.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # Workload binary, relative to the directory the harness is started from
    workload_path: str = os.getenv("BENCH_WORKLOAD", "../target/release/rust-ml-benchmark")

    # Destination for the per-phase CSV files
    output_dir: str = os.getenv("BENCH_OUTPUT_DIR", "results")

    # Build collaborator, run only when the workload binary is missing.
    # An empty command disables the build step.
    build_command: str = os.getenv("BENCH_BUILD_COMMAND", "cargo build --release")
    build_dir: str = os.getenv("BENCH_BUILD_DIR", "..")


settings = Settings()
