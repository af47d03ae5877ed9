#!/usr/bin/env python3
"""
Workload build invocation.

The build itself is external; this module only runs the configured command
once when the workload binary is missing and reports failure.
"""

import shlex
from dataclasses import dataclass

from .errors import BuildError, WorkloadExecutionError
from .workload_executor import WorkloadExecutor


@dataclass
class BuildStep:
    """A build command plus the directory it runs in."""

    command: str
    cwd: str | None = None

    def argv(self) -> list[str]:
        return shlex.split(self.command)

    def run(self, executor: WorkloadExecutor, model_path: str, image_path: str) -> None:
        """
        Run the build command.

        The model and image paths are passed as MODEL_PATH and IMAGE_PATH in
        the build's environment. Raises BuildError on any failure.
        """
        argv = self.argv()
        if not argv:
            raise BuildError("Build command is empty")

        print(f"🔨 Building workload: {self.command}")
        env = {"MODEL_PATH": model_path, "IMAGE_PATH": image_path}
        try:
            result = executor.execute(argv, env=env, cwd=self.cwd)
        except WorkloadExecutionError as e:
            raise BuildError(str(e)) from e

        if not result.succeeded:
            details = "\n".join(result.stderr_tail())
            message = f"Build failed with exit code {result.returncode}"
            raise BuildError(f"{message}\n{details}" if details else message)
        print("✅ Build completed")
