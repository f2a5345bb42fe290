"""Tests for descent plotting."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from lander.dynamics.state import InputSnapshot  # noqa: E402
from lander.plotting import plot_descent  # noqa: E402
from lander.simulation import SimulationResult, Simulator  # noqa: E402


def _short_run() -> SimulationResult:
    sim = Simulator.from_start()
    for i in range(30):
        sim.tick(InputSnapshot(rotate_left=i < 10, boost_up=i % 2 == 0), 0.05)
    return SimulationResult.from_simulator(sim)


class TestPlotDescent:
    """Test the descent dashboard."""

    def test_returns_figure(self):
        fig = plot_descent(_short_run())
        try:
            assert isinstance(fig, Figure)
            assert len(fig.axes) == 4
            assert fig._suptitle.get_text() == "Lander Descent"
        finally:
            plt.close(fig)

    def test_custom_title(self):
        fig = plot_descent(_short_run(), title="Europa")
        try:
            assert fig._suptitle.get_text() == "Europa"
        finally:
            plt.close(fig)

    def test_saves(self, tmp_path):
        fig = plot_descent(_short_run())
        path = tmp_path / "descent.png"
        fig.savefig(path)
        plt.close(fig)
        assert path.exists()
