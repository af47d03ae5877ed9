#!/usr/bin/env python3
"""
Execute-and-capture interface for external commands.

The driver only needs a command's exit status and its stdout text, so
process handling sits behind this narrow interface and can be replaced by
an in-memory fake in tests.
"""

import os
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .errors import WorkloadExecutionError


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one completed command."""

    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def stderr_tail(self, max_lines: int = 5) -> list[str]:
        """Get the last few non-empty stderr lines for diagnostics."""
        lines = [line for line in self.stderr.splitlines() if line.strip()]
        return lines[-max_lines:]


class WorkloadExecutor(ABC):
    """
    Abstract base class for running a command and capturing its output.

    Implementations block until the command finishes.
    """

    @abstractmethod
    def execute(
        self,
        command: Sequence[str],
        env: Mapping[str, str] | None = None,
        cwd: str | None = None,
    ) -> CommandResult:
        """
        Run the command to completion.

        Raises WorkloadExecutionError if it could not be started.
        """


class SubprocessExecutor(WorkloadExecutor):
    """Runs commands with subprocess, capturing stdout and stderr as text."""

    def execute(
        self,
        command: Sequence[str],
        env: Mapping[str, str] | None = None,
        cwd: str | None = None,
    ) -> CommandResult:
        run_env = None
        if env is not None:
            run_env = {**os.environ, **env}

        try:
            result = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=run_env,
                cwd=cwd,
                check=False,
            )
        except OSError as e:
            raise WorkloadExecutionError(f"Failed to launch {command[0]}: {e}") from e

        return CommandResult(returncode=result.returncode, stdout=result.stdout, stderr=result.stderr)
