import json
import subprocess
import sys
from pathlib import Path

import pytest


MAIN = Path(__file__).resolve().parents[1] / "main.py"


def _run(args, cwd):
    return subprocess.run(
        [sys.executable, str(MAIN), *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        timeout=300,
    )


@pytest.mark.parametrize(
    "content",
    [
        {"ds": 0.3},                      # too few samples per wall
        {"nx": 63},                       # odd grid
        {"legD": 0.05, "gutD": 0.1},      # gut wider than leg
        "{not json",                      # malformed file
        [1, 2, 3],                        # not an object
    ],
)
def test_bad_parameters_exit_with_code_2(content, temp_dir):
    """Unusable parameters stop the driver with exit code 2 and no traceback."""
    path = temp_dir / "params.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content))

    result = _run([str(path)], temp_dir)

    assert result.returncode == 2, f"Expected exit code 2, got {result.returncode}: {result.stderr}"
    assert "Invalid parameters" in result.stderr
    assert "Traceback" not in result.stderr


def test_missing_parameter_file_exits_with_code_2(temp_dir):
    """A parameter file that does not exist is reported, not raised."""
    result = _run([str(temp_dir / "missing.json")], temp_dir)

    assert result.returncode == 2
    assert "Traceback" not in result.stderr


def test_valid_run_writes_files(temp_dir):
    """A coarse valid run passes the checks and writes every table plus the report."""
    out_dir = temp_dir / "out"
    path = temp_dir / "params.json"
    path.write_text(json.dumps({"nx": 64, "name": "tube", "out_dir": str(out_dir)}))

    result = _run([str(path)], temp_dir)

    assert result.returncode == 0, result.stderr
    for ext in ("vertex", "spring", "beam", "target", "porous", "checks.json"):
        assert (out_dir / f"tube.{ext}").is_file(), f"tube.{ext} should be written"
