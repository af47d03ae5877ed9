#!/usr/bin/env python3
"""
Harness error types.

HarnessError subclasses are fatal and end the run with exit status 1.
WorkloadExecutionError only affects the iteration that raised it.
"""


class HarnessError(Exception):
    """Fatal precondition failure; aborts the whole run."""


class UsageError(HarnessError):
    """Invalid command-line arguments."""


class WorkloadNotFoundError(HarnessError):
    """The workload executable is missing or not runnable."""


class BuildError(HarnessError):
    """The workload build command failed."""


class OutputError(HarnessError):
    """The output directory or a CSV file could not be created."""


class WorkloadExecutionError(Exception):
    """A single workload run could not be launched."""
