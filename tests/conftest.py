import pytest

from workload_bench.phase_schema import BLOCK_TERMINATOR
from workload_bench.workload_executor import CommandResult, WorkloadExecutor


def metrics_block(
    name,
    wall="3.0ms",
    user="1.2345ms",
    system="500µs",
    rss="2048 bytes",
    cpu="87.666%",
    terminate=True,
):
    lines = [
        f"============= {name} Metrics =============",
        f"Wall Clock Time: {wall}",
        f"User time: {user}",
        f"System time: {system}",
        f"Max RSS: {rss}",
        f"CPU Usage: {cpu}",
    ]
    if terminate:
        lines.append(BLOCK_TERMINATOR)
    return lines


def workload_output(*blocks):
    lines = []
    for block in blocks:
        lines.extend(block)
    lines.append("Predicted Class Index: 281")
    lines.append("Confidence Score: 0.9123")
    return "\n".join(lines) + "\n"


class FakeExecutor(WorkloadExecutor):
    """Returns scripted results in order and records every command."""

    def __init__(self, results):
        self.results = list(results)
        self.calls = []

    def execute(self, command, env=None, cwd=None):
        self.calls.append({"command": list(command), "env": env, "cwd": cwd})
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def ok(stdout):
    return CommandResult(returncode=0, stdout=stdout)


def failed(returncode=1, stderr="thread 'main' panicked"):
    return CommandResult(returncode=returncode, stdout="", stderr=stderr)


@pytest.fixture
def workload(tmp_path):
    path = tmp_path / "rust-ml-benchmark"
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path
