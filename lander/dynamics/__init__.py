"""Dynamics module for the 2D lander.

Provides the craft state representation and the translational integration
stage (rotated thrust, gravity, semi-implicit Euler).

Example:
    >>> from lander.dynamics import CraftState, InputSnapshot, integrate
    >>> from lander.environment import EnvironmentConstants
    >>>
    >>> state = CraftState.at_start()
    >>> integrate(state, InputSnapshot(), dt=0.1, env=EnvironmentConstants())
"""

from lander.dynamics.state import (
    CraftState,
    InputSnapshot,
    Thruster,
)
from lander.dynamics.translation import (
    body_to_world,
    integrate,
    rotate_vector,
    world_acceleration,
)

__all__ = [
    # State
    "CraftState",
    "InputSnapshot",
    "Thruster",
    # Translation
    "body_to_world",
    "integrate",
    "rotate_vector",
    "world_acceleration",
]
