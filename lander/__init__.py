"""Lander - flight dynamics and attitude control for a 2D lunar lander.

This package provides the per-tick update loop of a lander simulation:
reaction-control attitude control, translational integration under
constant gravity with binary main-engine boost, and the derived altitude
readout.

Example:
    >>> from lander import EnvironmentConstants, InputSnapshot, Simulator
    >>> from lander.environment import CelestialBody
    >>>
    >>> env = EnvironmentConstants.for_body(CelestialBody.MOON)
    >>> sim = Simulator.from_start(env=env)
    >>> view = sim.tick(InputSnapshot(boost_up=True), dt=1 / 60)
    >>> print(f"Altitude: {view.altitude:.1f}")
"""

__version__ = "0.1.0"

from lander.control import (
    select_thruster,
    update_attitude,
)
from lander.dynamics import (
    CraftState,
    InputSnapshot,
    Thruster,
    integrate,
)
from lander.environment import (
    CelestialBody,
    EnvironmentConstants,
    LanderProperties,
)
from lander.errors import (
    InvalidConfiguration,
    LanderError,
    MissingSingleton,
)
from lander.readout import (
    AltitudeLabel,
    DisplaySink,
    RecordingSink,
    publish_altitude,
    sprite_frame,
)
from lander.simulation import (
    CraftView,
    SimulationResult,
    Simulator,
    World,
)

__all__ = [
    # Control
    "select_thruster",
    "update_attitude",
    # Dynamics
    "CraftState",
    "InputSnapshot",
    "Thruster",
    "integrate",
    # Environment
    "CelestialBody",
    "EnvironmentConstants",
    "LanderProperties",
    # Errors
    "InvalidConfiguration",
    "LanderError",
    "MissingSingleton",
    # Readout
    "AltitudeLabel",
    "DisplaySink",
    "RecordingSink",
    "publish_altitude",
    "sprite_frame",
    # Simulation
    "CraftView",
    "SimulationResult",
    "Simulator",
    "World",
]
