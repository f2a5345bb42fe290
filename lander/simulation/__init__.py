"""Simulation module for the lander.

Provides the fixed-step update loop, the entity container that holds the
single craft, and trajectory results.

Example:
    >>> from lander.dynamics import InputSnapshot
    >>> from lander.simulation import Simulator
    >>>
    >>> sim = Simulator.from_start()
    >>> while sim.altitude > 0:
    ...     sim.tick(InputSnapshot(), dt=1 / 60)
"""

from lander.simulation.simulator import (
    CraftView,
    SimulationResult,
    Simulator,
)
from lander.simulation.world import World

__all__ = [
    "CraftView",
    "SimulationResult",
    "Simulator",
    "World",
]
