"""Startup configuration for the lander core.

EnvironmentConstants is built once when the simulation starts and is
read-only afterwards. Selecting a different celestial body means building a
different configuration.

LanderProperties carries the vehicle's mass and main-engine limits. The
update loop treats thrust as a binary boost and never reads these values;
they are kept for collaborators (HUDs, future throttle and fuel models).

Example:
    >>> from lander.environment import CelestialBody, EnvironmentConstants
    >>>
    >>> env = EnvironmentConstants.for_body(CelestialBody.MOON)
    >>> env.gravity
    16.25
"""

import logging
import math
from dataclasses import dataclass

from beartype import beartype

from lander.environment.bodies import GRAVITY_SCALE, CelestialBody, scaled_gravity
from lander.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

# =============================================================================
# Defaults
# =============================================================================

# Reaction-control angular rate [rad/s] (30 deg/s)
RCS_RATE: float = 0.523598775598299

# Body-frame vertical boost while the main engine is on [world units/s^2]
BOOST_MAGNITUDE: float = 100.0

# Offset added to vertical position to produce the displayed altitude
BASELINE_ALTITUDE: float = 2000.0

# Vehicle (reserved)
LANDER_MASS: float = 15_000.0  # Dry mass [kg]
LANDER_FUEL_MASS: float = 5_000.0  # Main engine propellant [kg]
LANDER_THRUST_MAX: float = 33_750.0  # [N]
LANDER_THRUST_MIN: float = 4_500.0  # [N]


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidConfiguration(f"{name} must be finite, got {value}")


def _require_non_negative(name: str, value: float) -> None:
    _require_finite(name, value)
    if value < 0:
        raise InvalidConfiguration(f"{name} must be non-negative, got {value}")


# =============================================================================
# Environment Constants
# =============================================================================


@beartype
@dataclass(frozen=True)
class EnvironmentConstants:
    """Immutable environment configuration for one session.

    Attributes:
        gravity: Gravitational acceleration magnitude [world units/s^2]
        rcs_rate: Reaction-control angular rate [rad/s]
        boost: Body-frame boost magnitude [world units/s^2]
        baseline_altitude: Offset added to position.y to give altitude
        body: Body the gravity was selected from
    """
    gravity: float = scaled_gravity(CelestialBody.MOON)
    rcs_rate: float = RCS_RATE
    boost: float = BOOST_MAGNITUDE
    baseline_altitude: float = BASELINE_ALTITUDE
    body: CelestialBody = CelestialBody.MOON

    def __post_init__(self) -> None:
        """Reject non-finite values and negative magnitudes."""
        _require_non_negative("gravity", self.gravity)
        _require_non_negative("rcs_rate", self.rcs_rate)
        _require_non_negative("boost", self.boost)
        _require_finite("baseline_altitude", self.baseline_altitude)
        logger.debug(
            "Environment configured: body=%s gravity=%.4f rcs_rate=%.4f boost=%.1f",
            self.body.name, self.gravity, self.rcs_rate, self.boost,
        )

    @classmethod
    def for_body(
        cls,
        body: CelestialBody = CelestialBody.MOON,
        rcs_rate: float = RCS_RATE,
        boost: float = BOOST_MAGNITUDE,
        baseline_altitude: float = BASELINE_ALTITUDE,
        scale: float = GRAVITY_SCALE,
    ) -> "EnvironmentConstants":
        """Create configuration with gravity selected from a celestial body.

        Args:
            body: Body to descend onto
            rcs_rate: Reaction-control angular rate [rad/s]
            boost: Body-frame boost magnitude [world units/s^2]
            baseline_altitude: Altitude offset
            scale: World units per meter applied to surface gravity
        """
        return cls(
            gravity=scaled_gravity(body, scale),
            rcs_rate=rcs_rate,
            boost=boost,
            baseline_altitude=baseline_altitude,
            body=body,
        )


# =============================================================================
# Vehicle Properties
# =============================================================================


@beartype
@dataclass(frozen=True)
class LanderProperties:
    """Mass and main-engine limits of the lander.

    Not consumed by the update loop: rotation is a direct rate integration
    independent of mass, and thrust is a binary boost.

    Attributes:
        mass: Dry mass [kg]
        fuel_mass: Main engine propellant mass [kg]
        thrust_max: Maximum main engine thrust [N]
        thrust_min: Minimum main engine thrust [N]
    """
    mass: float = LANDER_MASS
    fuel_mass: float = LANDER_FUEL_MASS
    thrust_max: float = LANDER_THRUST_MAX
    thrust_min: float = LANDER_THRUST_MIN

    def __post_init__(self) -> None:
        """Validate masses and thrust limits."""
        _require_non_negative("mass", self.mass)
        _require_non_negative("fuel_mass", self.fuel_mass)
        _require_non_negative("thrust_max", self.thrust_max)
        _require_non_negative("thrust_min", self.thrust_min)
        if self.thrust_min > self.thrust_max:
            raise InvalidConfiguration(
                f"thrust_min ({self.thrust_min}) exceeds thrust_max ({self.thrust_max})"
            )

    @property
    def wet_mass(self) -> float:
        """Dry mass plus propellant [kg]."""
        return self.mass + self.fuel_mass

    @property
    def throttle_range(self) -> tuple[float, float]:
        """Minimum and maximum throttle fractions (min/max thrust ratio, 1.0)."""
        if self.thrust_max == 0:
            return (0.0, 0.0)
        return (self.thrust_min / self.thrust_max, 1.0)
