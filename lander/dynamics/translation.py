"""Translational integration for the lander.

Maps the current orientation and boost input to a world-frame acceleration,
then integrates velocity and position with semi-implicit (symplectic) Euler:

    a_body  = (0, boost if boost_up else 0)
    a_world = R(orientation) @ a_body - (0, gravity)
    v      += a_world * dt
    p      += v * dt          (uses the updated velocity)
    altitude = baseline_altitude + p.y

Thrust follows the craft's nose; gravity always acts along world -Y.

Example:
    >>> from lander.dynamics import CraftState, InputSnapshot, integrate
    >>> from lander.environment import EnvironmentConstants
    >>>
    >>> state = CraftState.at_start(orientation_deg=0.0)
    >>> env = EnvironmentConstants()
    >>> accel = integrate(state, InputSnapshot(boost_up=True), 0.1, env)
"""

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

from lander.dynamics.state import CraftState, InputSnapshot
from lander.environment.config import EnvironmentConstants

# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True, fastmath=True)
def _rotate(x: float, y: float, angle: float) -> tuple[float, float]:
    """Rotate (x, y) counter-clockwise by angle about the viewing axis."""
    c = np.cos(angle)
    s = np.sin(angle)
    return (c * x - s * y, s * x + c * y)


@njit(cache=True, fastmath=True)
def _symplectic_euler_step(
    px: float, py: float,
    vx: float, vy: float,
    ax: float, ay: float,
    dt: float,
) -> tuple[float, float, float, float]:
    """Velocity first, then position from the updated velocity."""
    vx_new = vx + ax * dt
    vy_new = vy + ay * dt
    px_new = px + vx_new * dt
    py_new = py + vy_new * dt
    return (px_new, py_new, vx_new, vy_new)


# =============================================================================
# Frame Transforms
# =============================================================================


@beartype
def rotate_vector(vector: NDArray[np.float64], angle: float) -> NDArray[np.float64]:
    """Rotate a 2-vector counter-clockwise by angle [rad]."""
    x, y = _rotate(float(vector[0]), float(vector[1]), angle)
    return np.array([x, y])


@beartype
def body_to_world(a_body: NDArray[np.float64], orientation: float) -> NDArray[np.float64]:
    """Transform a body-frame vector into the world frame."""
    return rotate_vector(a_body, orientation)


@beartype
def world_acceleration(
    orientation: float,
    boosting: bool,
    boost: float,
    gravity: float,
) -> NDArray[np.float64]:
    """Compute world-frame acceleration from thrust and gravity.

    Args:
        orientation: Craft attitude [rad]
        boosting: Whether the main engine is on
        boost: Body-frame boost magnitude
        gravity: Gravity magnitude (applied along world -Y, never rotated)

    Returns:
        Acceleration [ax, ay] in world frame
    """
    a_body = np.zeros(2)
    if boosting:
        a_body[1] = boost

    a_world = body_to_world(a_body, orientation)
    a_world[1] -= gravity
    return a_world


# =============================================================================
# Integration
# =============================================================================


@beartype
def integrate(
    state: CraftState,
    inputs: InputSnapshot,
    dt: float,
    env: EnvironmentConstants,
) -> NDArray[np.float64]:
    """Advance velocity, position and altitude by one tick.

    Must run after attitude control so thrust uses this tick's orientation.

    Args:
        state: Craft state, mutated in place
        inputs: Directions held this tick
        dt: Time step [s]
        env: Environment configuration

    Returns:
        World-frame acceleration applied this tick
    """
    accel = world_acceleration(state.orientation, inputs.boost_up, env.boost, env.gravity)

    px, py, vx, vy = _symplectic_euler_step(
        float(state.position[0]), float(state.position[1]),
        float(state.velocity[0]), float(state.velocity[1]),
        float(accel[0]), float(accel[1]),
        dt,
    )
    state.velocity[0] = vx
    state.velocity[1] = vy
    state.position[0] = px
    state.position[1] = py

    state.derive_altitude(env.baseline_altitude)
    return accel
