"""Read-only outputs for presentation collaborators.

The core pushes the derived altitude to a display sink once per tick, after
integration. Sinks never feed back into the simulation.

Also provides the sprite-sheet frame selection used to show which thruster
is firing. The lander sheet has six frames:

    0: idle            1: main engine
    2: right RCS       3: right RCS + main engine
    4: left RCS        5: left RCS + main engine

Example:
    >>> from lander.readout import AltitudeLabel, publish_altitude
    >>>
    >>> label = AltitudeLabel(precision=1)
    >>> publish_altitude(label, 1991.0625)
    >>> label.text
    'Altitude: 1991.1'
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from beartype import beartype

from lander.dynamics.state import Thruster

SPRITE_FRAME_COUNT: int = 6

_THRUSTER_FRAMES: dict[Thruster, int] = {
    Thruster.NONE: 0,
    Thruster.RIGHT: 2,
    Thruster.LEFT: 4,
}


# =============================================================================
# Display Sinks
# =============================================================================


@runtime_checkable
class DisplaySink(Protocol):
    """Protocol for altitude displays."""

    def show_altitude(self, altitude: float) -> None:
        """Render the altitude value."""
        ...


@beartype
def publish_altitude(sink: DisplaySink, altitude: float) -> None:
    """Push the derived altitude to a display sink."""
    sink.show_altitude(altitude)


@beartype
@dataclass
class AltitudeLabel:
    """Text label showing the current altitude.

    Attributes:
        prefix: Text before the value
        precision: Decimal places
        text: Most recently rendered text
    """
    prefix: str = "Altitude: "
    precision: int = 1
    text: str = field(default="", init=False)

    def show_altitude(self, altitude: float) -> None:
        self.text = f"{self.prefix}{altitude:.{self.precision}f}"


@beartype
@dataclass
class RecordingSink:
    """Sink that keeps every published altitude."""
    values: list[float] = field(default_factory=list)

    def show_altitude(self, altitude: float) -> None:
        self.values.append(altitude)

    @property
    def latest(self) -> float | None:
        """Most recent altitude, or None before the first tick."""
        return self.values[-1] if self.values else None


# =============================================================================
# Sprite Frames
# =============================================================================


@beartype
def sprite_frame(thruster: Thruster, boosting: bool) -> int:
    """Select the sprite-sheet frame for the thruster and engine state.

    Args:
        thruster: Reaction-control thruster firing this tick
        boosting: Whether the main engine is on

    Returns:
        Frame index in [0, SPRITE_FRAME_COUNT)
    """
    frame = _THRUSTER_FRAMES[thruster]
    if boosting:
        frame += 1
    return frame
