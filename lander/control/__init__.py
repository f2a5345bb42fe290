"""Attitude control for the lander.

Provides the reaction-control policy that turns held directions into a
thruster selection and an orientation change.
"""

from lander.control.attitude import (
    select_thruster,
    update_attitude,
)

__all__ = [
    "select_thruster",
    "update_attitude",
]
