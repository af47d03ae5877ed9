import sys

import pytest

from workload_bench.errors import WorkloadExecutionError
from workload_bench.workload_executor import CommandResult, SubprocessExecutor


def test_captures_stdout_and_exit_status():
    result = SubprocessExecutor().execute([sys.executable, "-c", "import sys; print('hello'); sys.exit(3)"])
    assert result.returncode == 3
    assert result.stdout == "hello\n"
    assert not result.succeeded


def test_env_is_merged_into_environment():
    code = "import os; print(os.environ['MODEL_PATH'], 'PATH' in os.environ)"
    result = SubprocessExecutor().execute([sys.executable, "-c", code], env={"MODEL_PATH": "m.onnx"})
    assert result.stdout.split() == ["m.onnx", "True"]


def test_launch_failure(tmp_path):
    with pytest.raises(WorkloadExecutionError):
        SubprocessExecutor().execute([str(tmp_path / "does-not-exist")])


def test_stderr_tail():
    result = CommandResult(returncode=1, stdout="", stderr="a\n\nb\nc\nd\ne\nf\n")
    assert result.stderr_tail() == ["b", "c", "d", "e", "f"]
    assert result.stderr_tail(max_lines=2) == ["e", "f"]
