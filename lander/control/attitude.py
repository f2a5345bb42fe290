"""Reaction-control attitude control.

Maps held directions to a thruster selection and an incremental rotation.
The policy is level-triggered and evaluated fresh every tick:

1. rotate_left held  -> LEFT thruster, orientation += rcs_rate * dt
2. rotate_right held -> RIGHT thruster, orientation -= rcs_rate * dt
3. otherwise         -> NONE, no rotation

Left wins when both directions are held. Orientation is not wrapped.

Example:
    >>> from lander.control import update_attitude
    >>> from lander.dynamics import CraftState, InputSnapshot
    >>>
    >>> state = CraftState.at_start()
    >>> update_attitude(state, InputSnapshot(rotate_left=True), 0.1, 0.5)
    0.05
"""

from beartype import beartype

from lander.dynamics.state import CraftState, InputSnapshot, Thruster


@beartype
def select_thruster(inputs: InputSnapshot) -> Thruster:
    """Select the reaction-control thruster for the held directions."""
    if inputs.rotate_left:
        return Thruster.LEFT
    if inputs.rotate_right:
        return Thruster.RIGHT
    return Thruster.NONE


@beartype
def update_attitude(
    state: CraftState,
    inputs: InputSnapshot,
    dt: float,
    rcs_rate: float,
) -> float:
    """Update thruster selection and orientation for one tick.

    Args:
        state: Craft state, mutated in place
        inputs: Directions held this tick
        dt: Time step [s]
        rcs_rate: Reaction-control angular rate [rad/s]

    Returns:
        Orientation change applied this tick [rad]
    """
    thruster = select_thruster(inputs)

    delta_angle = 0.0
    if thruster is Thruster.LEFT:
        delta_angle = rcs_rate * dt
    elif thruster is Thruster.RIGHT:
        delta_angle = -rcs_rate * dt

    state.thruster = thruster
    state.orientation += delta_angle
    return delta_angle
