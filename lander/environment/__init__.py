"""Environment configuration for the lander simulation.

Provides celestial body gravity values and the immutable per-session
configuration consumed by the update loop.

Example:
    >>> from lander.environment import CelestialBody, EnvironmentConstants
    >>>
    >>> env = EnvironmentConstants.for_body(CelestialBody.GANYMEDE)
"""

from lander.environment.bodies import (
    GRAVITY_SCALE,
    CelestialBody,
    scaled_gravity,
    surface_gravity,
)
from lander.environment.config import (
    EnvironmentConstants,
    LanderProperties,
)

__all__ = [
    "GRAVITY_SCALE",
    "CelestialBody",
    "scaled_gravity",
    "surface_gravity",
    "EnvironmentConstants",
    "LanderProperties",
]
