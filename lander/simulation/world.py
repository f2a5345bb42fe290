"""Entity container for the simulation.

The update loop assumes exactly one craft for the lifetime of a session.
World.single_craft() is the lookup each tick performs; it raises
MissingSingleton instead of silently skipping the tick.
"""

import logging
from dataclasses import dataclass, field

from beartype import beartype

from lander.dynamics.state import CraftState
from lander.errors import MissingSingleton

logger = logging.getLogger(__name__)


@beartype
@dataclass
class World:
    """Crafts spawned into the simulation, keyed by handle."""
    _crafts: dict[int, CraftState] = field(default_factory=dict, init=False, repr=False)
    _next_handle: int = field(default=0, init=False, repr=False)

    def spawn(self, state: CraftState) -> int:
        """Add a craft and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._crafts[handle] = state
        logger.debug("Spawned craft %d at (%.2f, %.2f)", handle, state.position[0], state.position[1])
        return handle

    def despawn(self, handle: int) -> CraftState:
        """Remove a craft and return its final state."""
        try:
            state = self._crafts.pop(handle)
        except KeyError:
            raise KeyError(f"No craft with handle {handle}") from None
        logger.debug("Despawned craft %d", handle)
        return state

    def single_craft(self) -> CraftState:
        """Get the one and only craft.

        Raises:
            MissingSingleton: If zero or more than one craft exists
        """
        if len(self._crafts) != 1:
            raise MissingSingleton(len(self._crafts))
        return next(iter(self._crafts.values()))

    def __len__(self) -> int:
        return len(self._crafts)
