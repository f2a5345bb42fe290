"""Unit tests for environment configuration."""

import dataclasses

import numpy as np
import pytest
from numpy.testing import assert_allclose

from lander.environment import (
    GRAVITY_SCALE,
    CelestialBody,
    EnvironmentConstants,
    LanderProperties,
    scaled_gravity,
    surface_gravity,
)
from lander.errors import InvalidConfiguration, LanderError

# =============================================================================
# Celestial Body Tests
# =============================================================================


class TestCelestialBodies:
    """Test body gravity values."""

    def test_surface_gravity_values(self):
        expected = {
            CelestialBody.MOON: 1.625,
            CelestialBody.EUROPA: 1.314,
            CelestialBody.IO: 1.796,
            CelestialBody.CALLISTO: 1.235,
            CelestialBody.GANYMEDE: 1.428,
        }
        for body, g in expected.items():
            assert surface_gravity(body) == g

    def test_scaled_gravity(self):
        """World-unit gravity is surface gravity times the scale."""
        assert GRAVITY_SCALE == 10.0
        assert scaled_gravity(CelestialBody.MOON) == 16.25
        assert_allclose(scaled_gravity(CelestialBody.EUROPA, 2.0), 2.628)


# =============================================================================
# Environment Constants Tests
# =============================================================================


class TestEnvironmentConstants:
    """Test EnvironmentConstants defaults and validation."""

    def test_defaults(self):
        """Defaults select the Moon."""
        env = EnvironmentConstants()

        assert env.body is CelestialBody.MOON
        assert env.gravity == 16.25
        assert env.rcs_rate == pytest.approx(np.pi / 6)
        assert env.boost == 100.0
        assert env.baseline_altitude == 2000.0

    @pytest.mark.parametrize("body", list(CelestialBody))
    def test_for_body(self, body):
        env = EnvironmentConstants.for_body(body)
        assert env.body is body
        assert_allclose(env.gravity, surface_gravity(body) * GRAVITY_SCALE)

    def test_immutable(self):
        env = EnvironmentConstants()
        with pytest.raises(dataclasses.FrozenInstanceError):
            env.gravity = 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"gravity": float("nan")},
            {"gravity": float("inf")},
            {"gravity": -1.0},
            {"rcs_rate": -0.1},
            {"rcs_rate": float("nan")},
            {"boost": -100.0},
            {"boost": float("-inf")},
            {"baseline_altitude": float("nan")},
        ],
    )
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(InvalidConfiguration):
            EnvironmentConstants(**kwargs)

    def test_zero_gravity_allowed(self):
        """Zero gravity isolates thrust behavior."""
        assert EnvironmentConstants(gravity=0.0).gravity == 0.0

    def test_negative_baseline_allowed(self):
        assert EnvironmentConstants(baseline_altitude=-50.0).baseline_altitude == -50.0

    def test_error_hierarchy(self):
        """InvalidConfiguration is also a ValueError."""
        with pytest.raises(ValueError):
            EnvironmentConstants(gravity=-9.8)
        assert issubclass(InvalidConfiguration, LanderError)


# =============================================================================
# Lander Properties Tests
# =============================================================================


class TestLanderProperties:
    """Test reserved vehicle configuration."""

    def test_defaults(self):
        props = LanderProperties()

        assert props.mass == 15_000.0
        assert props.fuel_mass == 5_000.0
        assert props.wet_mass == 20_000.0
        assert props.thrust_max == 33_750.0
        assert props.thrust_min == 4_500.0

    def test_throttle_range(self):
        low, high = LanderProperties().throttle_range
        assert low == pytest.approx(4_500.0 / 33_750.0)
        assert high == 1.0

    def test_min_thrust_above_max(self):
        with pytest.raises(InvalidConfiguration, match="thrust_min"):
            LanderProperties(thrust_min=40_000.0)

    def test_rejects_negative_mass(self):
        with pytest.raises(InvalidConfiguration):
            LanderProperties(mass=-1.0)
