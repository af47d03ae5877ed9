import csv
import sys

import pytest
from conftest import metrics_block, workload_output

from workload_bench.main import main


@pytest.fixture
def fake_workload(tmp_path):
    """A real executable that prints two phase blocks, or fails when the image is 'bad.jpg'."""
    output = workload_output(
        metrics_block("Inference", wall="1.5s", system="0.5ms"), metrics_block("Total", wall="2s", system="0.5ms")
    )
    script = tmp_path / "fake-workload"
    script.write_text(
        f"#!{sys.executable}\n"
        "import sys\n"
        "if sys.argv[2] == 'bad.jpg':\n"
        "    sys.exit(1)\n"
        f"sys.stdout.write({output!r})\n",
        encoding="utf-8",
    )
    script.chmod(0o755)
    return script


def test_end_to_end(tmp_path, fake_workload):
    out_dir = tmp_path / "results"
    status = main(["3", "model.onnx", "cat.jpg", "--workload", str(fake_workload), "--output-dir", str(out_dir),
                   "--no-build", "--quiet"])
    assert status == 0

    with open(out_dir / "inference.csv", newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["user_time", "system_time", "cpu_percent", "wallclock_time", "max_rss"]
    assert rows[1:] == [["1.234", "0.500", "87.67%", "1500.000", "2048"]] * 3
    assert (out_dir / "envload.csv").read_text().count("\n") == 1


def test_failed_iterations_still_exit_zero(tmp_path, fake_workload, capsys):
    status = main(["2", "model.onnx", "bad.jpg", "--workload", str(fake_workload),
                   "--output-dir", str(tmp_path / "results"), "--no-build"])
    assert status == 0
    assert "2 of 2 iterations failed" in capsys.readouterr().out


def test_phase_selection(tmp_path, fake_workload):
    out_dir = tmp_path / "results"
    status = main(["1", "model.onnx", "cat.jpg", "--workload", str(fake_workload), "--output-dir", str(out_dir),
                   "--no-build", "--phases", "Total"])
    assert status == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["total.csv"]


def test_missing_workload_exits_one(tmp_path, capsys):
    status = main(["1", "model.onnx", "cat.jpg", "--workload", str(tmp_path / "missing"),
                   "--output-dir", str(tmp_path / "results"), "--no-build"])
    assert status == 1
    assert "does not exist" in capsys.readouterr().err


def test_failed_build_exits_one(tmp_path, capsys):
    status = main(["1", "model.onnx", "cat.jpg", "--workload", str(tmp_path / "missing"),
                   "--output-dir", str(tmp_path / "results"),
                   "--build-command", f"{sys.executable} -c 'import sys; sys.exit(2)'", "--build-dir", str(tmp_path)])
    assert status == 1
    assert "Build failed" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["3", "model.onnx"],
        ["0", "model.onnx", "cat.jpg"],
        ["-2", "model.onnx", "cat.jpg"],
        ["many", "model.onnx", "cat.jpg"],
        ["3", "", "cat.jpg"],
        ["3", "model.onnx", ""],
        ["3", "model.onnx", "cat.jpg", "extra"],
        ["3", "model.onnx", "cat.jpg", "--phases", "Nonexistent"],
    ],
)
def test_bad_arguments_exit_one(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().err


def test_output_files_are_listed(tmp_path, fake_workload, capsys):
    out_dir = tmp_path / "results"
    main(["1", "model.onnx", "cat.jpg", "--workload", str(fake_workload), "--output-dir", str(out_dir),
          "--no-build", "--phases", "Inference", "Total"])
    out = capsys.readouterr().out
    assert str(out_dir / "inference.csv") in out
    assert str(out_dir / "total.csv") in out
