"""Smoke tests for the example scripts.

These tests verify that examples run without errors.
They don't verify correctness of results, just that the code executes.
"""

import os
import subprocess
import sys
from pathlib import Path

import numpy as np

EXAMPLES_DIR = Path(__file__).parent.parent / "lander" / "examples"


def run_example(example_name: str, *args: str, timeout: int = 120) -> subprocess.CompletedProcess:
    """Run an example script and return the result."""
    script_path = EXAMPLES_DIR / f"{example_name}.py"

    result = subprocess.run(
        [sys.executable, str(script_path), *args],
        capture_output=True,
        text=True,
        timeout=timeout,
        cwd=Path(__file__).parent.parent,  # Run from project root
        env={**os.environ, "MPLBACKEND": "Agg"},
    )

    return result


class TestExamplesSmoke:
    """Smoke tests that verify examples run without crashing."""

    def test_descent_runs(self, tmp_path) -> None:
        """Test that descent.py runs and writes its outputs."""
        result = run_example("descent", str(tmp_path))
        assert result.returncode == 0, f"descent failed:\n{result.stderr}"
        assert "LANDER DESCENT" in result.stdout
        assert (tmp_path / "descent.csv").exists()
        assert (tmp_path / "descent.png").exists()


class TestDescentPilot:
    """Check the scripted pilot reaches the ground under control."""

    def test_reaches_ground(self) -> None:
        from lander.examples.descent import MAX_SINK_RATE, run_descent

        sim = run_descent()
        view = sim.get_state()

        assert view.altitude <= 0.0
        assert abs(view.velocity[1]) < MAX_SINK_RATE + 5.0
        assert abs(view.orientation) < 0.02
        assert np.isfinite(view.position).all()
