"""2D craft state for the lander simulation.

The craft state contains:
- Position (2): [x, y] in world frame
- Velocity (2): [vx, vy] in world frame
- Orientation (1): rotation about the viewing axis [rad]
- Thruster (1): reaction-control thruster selected this tick
- Altitude (1): derived, baseline_altitude + y

Coordinate frames:
- World: X right, Y up, fixed to the terrain; gravity acts along -Y
- Body: fixed to the craft, +Y out of the nose

Orientation convention:
- Counter-clockwise positive, zero when the nose points along world +Y
- Unbounded; it is only ever used through sin/cos
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# Initial conditions
START_X: float = 0.0
START_Y: float = 0.0
START_ORIENTATION: float = float(np.radians(30.0))


# =============================================================================
# Thruster / Input
# =============================================================================


class Thruster(Enum):
    """Reaction-control thruster firing this tick."""

    NONE = auto()
    LEFT = auto()
    RIGHT = auto()


@beartype
@dataclass(frozen=True)
class InputSnapshot:
    """Logical directions held during one tick.

    Decoded from raw input by the host. Read as-is each tick, never
    buffered or debounced.

    Attributes:
        rotate_left: Rotate counter-clockwise
        rotate_right: Rotate clockwise
        boost_up: Main engine on
        down: Secondary direction, not used by the core
    """
    rotate_left: bool = False
    rotate_right: bool = False
    boost_up: bool = False
    down: bool = False

    @property
    def idle(self) -> bool:
        """True when no direction is held."""
        return not (self.rotate_left or self.rotate_right or self.boost_up or self.down)


# =============================================================================
# Craft State
# =============================================================================


@beartype
@dataclass
class CraftState:
    """State of the single simulated craft.

    Mutated in place every tick. Altitude is never assigned directly; it is
    refreshed from position through derive_altitude().

    Attributes:
        position: [x, y] world position
        velocity: [vx, vy] world velocity
        orientation: Attitude about the viewing axis [rad]
        thruster: Reaction-control thruster selected this tick
    """
    position: NDArray[np.float64]
    velocity: NDArray[np.float64]
    orientation: float = START_ORIENTATION
    thruster: Thruster = Thruster.NONE
    _altitude: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate vector shapes."""
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)

        if self.position.shape != (2,):
            raise ValueError(f"Position must be shape (2,), got {self.position.shape}")
        if self.velocity.shape != (2,):
            raise ValueError(f"Velocity must be shape (2,), got {self.velocity.shape}")

    @classmethod
    def at_start(
        cls,
        x: float = START_X,
        y: float = START_Y,
        vx: float = 0.0,
        vy: float = 0.0,
        orientation_deg: float = 30.0,
        baseline_altitude: float = 0.0,
    ) -> "CraftState":
        """Create the craft at its starting position.

        Args:
            x, y: World position
            vx, vy: World velocity
            orientation_deg: Initial attitude [degrees]
            baseline_altitude: Offset used to derive the initial altitude
        """
        state = cls(
            position=np.array([x, y], dtype=np.float64),
            velocity=np.array([vx, vy], dtype=np.float64),
            orientation=float(np.radians(orientation_deg)),
            thruster=Thruster.NONE,
        )
        state.derive_altitude(baseline_altitude)
        return state

    @property
    def altitude(self) -> float:
        """Displayed altitude, baseline_altitude + position.y."""
        return self._altitude

    def derive_altitude(self, baseline_altitude: float) -> float:
        """Refresh altitude from the current vertical position."""
        self._altitude = baseline_altitude + float(self.position[1])
        return self._altitude

    def nose_direction(self) -> NDArray[np.float64]:
        """Unit vector along the craft's nose in world frame."""
        return np.array([-np.sin(self.orientation), np.cos(self.orientation)])

    def copy(self) -> "CraftState":
        """Create a copy of this state."""
        state = CraftState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            orientation=self.orientation,
            thruster=self.thruster,
        )
        state._altitude = self._altitude
        return state
