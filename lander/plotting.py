"""Visualization of recorded descents.

Provides a dashboard of the trajectory, altitude, velocity and orientation
histories of a run. Uses matplotlib with the same style for every plot.
"""

import matplotlib.pyplot as plt
import numpy as np
from beartype import beartype
from matplotlib.figure import Figure

from lander.simulation.simulator import SimulationResult

# =============================================================================
# Plot Style Configuration
# =============================================================================

COLORS = {
    "primary": "#2E86AB",  # Steel blue
    "secondary": "#A23B72",  # Berry
    "accent": "#F18F01",  # Orange
    "text": "#333333",
}

DEFAULT_FIGSIZE = (12, 8)


def _setup_style() -> None:
    """Configure matplotlib style for consistent appearance."""
    plt.rcParams.update(
        {
            "font.family": "sans-serif",
            "font.size": 11,
            "axes.titlesize": 13,
            "axes.labelsize": 11,
            "axes.edgecolor": COLORS["text"],
            "axes.labelcolor": COLORS["text"],
            "legend.fontsize": 10,
            "grid.alpha": 0.5,
        }
    )


# =============================================================================
# Descent Dashboard
# =============================================================================


@beartype
def plot_descent(
    result: SimulationResult,
    figsize: tuple[float, float] = DEFAULT_FIGSIZE,
    title: str | None = None,
) -> Figure:
    """Plot a 2x2 dashboard of a recorded descent.

    Panels:
    - Trajectory (x vs y), thruster firings marked
    - Altitude vs time
    - Velocity components vs time
    - Orientation vs time

    Args:
        result: Recorded trajectory
        figsize: Figure size (width, height) in inches
        title: Optional custom title

    Returns:
        matplotlib Figure object
    """
    _setup_style()

    t = result.time
    pos = result.position
    vel = result.velocity

    fig, axes = plt.subplots(2, 2, figsize=figsize)
    ax_traj, ax_alt, ax_vel, ax_att = axes.flat

    ax_traj.plot(pos[:, 0], pos[:, 1], color=COLORS["primary"], linewidth=2)
    firing = np.array([name != "NONE" for name in result.thruster], dtype=bool)
    if firing.any():
        ax_traj.scatter(
            pos[firing, 0], pos[firing, 1],
            s=8, color=COLORS["accent"], label="RCS firing", zorder=3,
        )
        ax_traj.legend()
    ax_traj.set_xlabel("x")
    ax_traj.set_ylabel("y")
    ax_traj.set_title("Trajectory")
    ax_traj.grid(True, alpha=0.3)

    ax_alt.plot(t, result.altitude, color=COLORS["primary"], linewidth=2)
    ax_alt.set_xlabel("Time (s)")
    ax_alt.set_ylabel("Altitude")
    ax_alt.set_title("Altitude")
    ax_alt.grid(True, alpha=0.3)

    ax_vel.plot(t, vel[:, 0], color=COLORS["secondary"], linewidth=2, label="vx")
    ax_vel.plot(t, vel[:, 1], color=COLORS["primary"], linewidth=2, label="vy")
    ax_vel.set_xlabel("Time (s)")
    ax_vel.set_ylabel("Velocity")
    ax_vel.set_title("Velocity")
    ax_vel.grid(True, alpha=0.3)
    ax_vel.legend()

    ax_att.plot(t, np.degrees(result.orientation), color=COLORS["accent"], linewidth=2)
    ax_att.set_xlabel("Time (s)")
    ax_att.set_ylabel("Orientation (deg)")
    ax_att.set_title("Orientation")
    ax_att.grid(True, alpha=0.3)

    fig.suptitle(title or "Lander Descent", fontsize=14)
    fig.tight_layout()
    return fig
