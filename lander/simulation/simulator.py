"""Fixed-step update loop for the lander.

The host owns the loop and calls tick() once per fixed time step with the
directions currently held. Each tick runs three stages in order:

    1. Attitude control        (thruster selection, rotation)
    2. Translational integration (thrust + gravity -> velocity -> position)
    3. Altitude readout        (push altitude to the display sink)

Integration depends on the orientation attitude control just produced, so
the order is fixed. There is no terminal condition: deciding what counts as
landing or crashing is up to the host.

Example:
    >>> from lander.dynamics import InputSnapshot
    >>> from lander.readout import AltitudeLabel
    >>> from lander.simulation import Simulator
    >>>
    >>> label = AltitudeLabel()
    >>> sim = Simulator.from_start(sink=label)
    >>>
    >>> for _ in range(600):  # 10 seconds at 60 Hz
    ...     view = sim.tick(InputSnapshot(boost_up=True), dt=1 / 60)
    >>> print(label.text)
"""

import logging
import math
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.control.attitude import update_attitude
from lander.dynamics.state import CraftState, InputSnapshot, Thruster
from lander.dynamics.translation import integrate
from lander.environment.config import EnvironmentConstants
from lander.errors import MissingSingleton
from lander.readout import DisplaySink, publish_altitude
from lander.simulation.world import World

logger = logging.getLogger(__name__)

# =============================================================================
# Read Accessor
# =============================================================================


class CraftView(NamedTuple):
    """Snapshot of the craft for presentation.

    position/orientation drive the sprite transform, thruster selects the
    animation frame, altitude goes to the text display.
    """
    position: NDArray[np.float64]  # [x, y] world position
    velocity: NDArray[np.float64]  # [vx, vy] world velocity
    orientation: float             # Attitude [rad]
    thruster: Thruster             # Thruster selected this tick
    altitude: float                # baseline_altitude + y
    time: float                    # Simulation time [s]

    @classmethod
    def of(cls, state: CraftState, time: float) -> "CraftView":
        """Snapshot a craft state. Arrays are copied."""
        return cls(
            position=state.position.copy(),
            velocity=state.velocity.copy(),
            orientation=state.orientation,
            thruster=state.thruster,
            altitude=state.altitude,
            time=time,
        )


# =============================================================================
# Simulator
# =============================================================================


@beartype
@dataclass
class Simulator:
    """Step-driven lander simulator.

    Owns the world (one craft) and the environment configuration for the
    session.

    Example:
        >>> sim = Simulator.from_start()
        >>> sim.tick(InputSnapshot(rotate_left=True), dt=0.02)
    """
    env: EnvironmentConstants = field(default_factory=EnvironmentConstants)
    sink: DisplaySink | None = None
    world: World = field(default_factory=World)
    record_history: bool = True

    # Internal
    _time: float = field(default=0.0, init=False, repr=False)
    _ticks: int = field(default=0, init=False, repr=False)
    _history: list[CraftView] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Derive the craft's altitude and record the initial state."""
        logger.info(
            "Simulator created. body=%s gravity=%.3f baseline=%.1f",
            self.env.body.name, self.env.gravity, self.env.baseline_altitude,
        )
        if len(self.world) == 1:
            craft = self.world.single_craft()
            craft.derive_altitude(self.env.baseline_altitude)
            if self.record_history:
                self._history = [CraftView.of(craft, self._time)]

    @classmethod
    def from_start(
        cls,
        env: EnvironmentConstants | None = None,
        sink: DisplaySink | None = None,
        x: float = 0.0,
        y: float = 0.0,
        vx: float = 0.0,
        vy: float = 0.0,
        orientation_deg: float = 30.0,
        record_history: bool = True,
    ) -> "Simulator":
        """Create a simulator with the craft spawned at its start position.

        Args:
            env: Environment configuration (lunar defaults if None)
            sink: Altitude display, if any
            x, y: Initial world position
            vx, vy: Initial world velocity
            orientation_deg: Initial attitude [degrees]
            record_history: Keep a snapshot after every tick
        """
        env = env or EnvironmentConstants()

        world = World()
        world.spawn(CraftState.at_start(
            x=x, y=y, vx=vx, vy=vy,
            orientation_deg=orientation_deg,
            baseline_altitude=env.baseline_altitude,
        ))

        return cls(env=env, sink=sink, world=world, record_history=record_history)

    def tick(self, inputs: InputSnapshot, dt: float) -> CraftView:
        """Advance the simulation by one fixed time step.

        The input snapshot comes first, so ``tick(inputs, dt)``. Callers that
        think of the step as ``(dt, inputs)`` can pass both by keyword.

        Args:
            inputs: Directions held this tick
            dt: Time step [s], a float

        Returns:
            Craft snapshot after the tick

        Raises:
            MissingSingleton: If the world does not hold exactly one craft
            ValueError: If dt is negative or non-finite
            BeartypeCallHintParamViolation: If dt is not a float (e.g. an int)
        """
        if not math.isfinite(dt) or dt < 0:
            raise ValueError(f"dt must be finite and non-negative, got {dt}")

        try:
            craft = self.world.single_craft()
        except MissingSingleton as err:
            logger.error("Tick %d aborted: %s", self._ticks, err)
            raise

        update_attitude(craft, inputs, dt, self.env.rcs_rate)
        integrate(craft, inputs, dt, self.env)

        if self.sink is not None:
            publish_altitude(self.sink, craft.altitude)

        self._time += dt
        self._ticks += 1

        view = CraftView.of(craft, self._time)
        if self.record_history:
            self._history.append(view)

        return view

    def get_state(self) -> CraftView:
        """Get a snapshot of the current craft state."""
        return CraftView.of(self.world.single_craft(), self._time)

    def get_history(self) -> list[CraftView]:
        """Get recorded snapshots, initial state first."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear recorded history, keeping the current state."""
        self._history = [self.get_state()]

    @property
    def time(self) -> float:
        """Elapsed simulation time [s]."""
        return self._time

    @property
    def ticks(self) -> int:
        """Number of completed ticks."""
        return self._ticks

    @property
    def altitude(self) -> float:
        """Current displayed altitude."""
        return self.world.single_craft().altitude


# =============================================================================
# Results and Analysis
# =============================================================================


@beartype
@dataclass
class SimulationResult:
    """Trajectory recorded over a run."""
    states: list[CraftView]

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array([s.time for s in self.states])

    @property
    def position(self) -> NDArray[np.float64]:
        """Position history, shape (N, 2)."""
        return np.array([s.position for s in self.states]).reshape(-1, 2)

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Velocity history, shape (N, 2)."""
        return np.array([s.velocity for s in self.states]).reshape(-1, 2)

    @property
    def orientation(self) -> NDArray[np.float64]:
        """Orientation history [rad]."""
        return np.array([s.orientation for s in self.states])

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history."""
        return np.array([s.altitude for s in self.states])

    @property
    def thruster(self) -> list[str]:
        """Thruster names per sample."""
        return [s.thruster.name for s in self.states]

    @classmethod
    def from_simulator(cls, sim: Simulator) -> "SimulationResult":
        """Create result from simulator history."""
        return cls(states=sim.get_history())

    def to_dataframe(self):
        """Convert to Polars DataFrame."""
        import polars as pl

        return pl.DataFrame({
            "time": self.time,
            "x": self.position[:, 0],
            "y": self.position[:, 1],
            "vx": self.velocity[:, 0],
            "vy": self.velocity[:, 1],
            "orientation": self.orientation,
            "thruster": self.thruster,
            "altitude": self.altitude,
        })
