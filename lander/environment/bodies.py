"""Candidate celestial bodies for the descent simulation.

Surface gravities are real-world values. The simulation works in world
units scaled by GRAVITY_SCALE, so the active gravity magnitude is
``surface_gravity * GRAVITY_SCALE`` (16.25 for the Moon).

Example:
    >>> from lander.environment import CelestialBody, scaled_gravity
    >>>
    >>> g = scaled_gravity(CelestialBody.EUROPA)  # 13.14
"""

from enum import Enum

from beartype import beartype

# =============================================================================
# Constants
# =============================================================================

# Surface gravity [m/s^2]
LUNAR_GRAVITY: float = 1.625
EUROPA_GRAVITY: float = 1.314
IO_GRAVITY: float = 1.796
CALLISTO_GRAVITY: float = 1.235
GANYMEDE_GRAVITY: float = 1.428

# World units per meter
GRAVITY_SCALE: float = 10.0


# =============================================================================
# Celestial Body Enum
# =============================================================================


class CelestialBody(Enum):
    """Bodies the lander can descend onto. Only one is active at a time."""

    MOON = LUNAR_GRAVITY
    EUROPA = EUROPA_GRAVITY
    IO = IO_GRAVITY
    CALLISTO = CALLISTO_GRAVITY
    GANYMEDE = GANYMEDE_GRAVITY


@beartype
def surface_gravity(body: CelestialBody) -> float:
    """Get surface gravity of a body [m/s^2]."""
    return float(body.value)


@beartype
def scaled_gravity(body: CelestialBody, scale: float = GRAVITY_SCALE) -> float:
    """Get gravity magnitude of a body in simulation world units.

    Args:
        body: Celestial body
        scale: World units per meter

    Returns:
        Gravity magnitude [world units/s^2]
    """
    return surface_gravity(body) * scale
