"""Exceptions raised by the lander core.

Both kinds are unrecoverable at the point of detection:

- MissingSingleton: the one-and-only craft is absent (or duplicated) when a
  tick begins.
- InvalidConfiguration: an environment or vehicle constant was rejected at
  startup.
"""


class LanderError(Exception):
    """Base class for lander core errors."""


class MissingSingleton(LanderError, LookupError):
    """Expected exactly one craft entity, found a different number."""

    def __init__(self, count: int) -> None:
        self.count = count
        if count == 0:
            msg = "No craft entity exists; the simulation requires exactly one"
        else:
            msg = f"Found {count} craft entities; the simulation requires exactly one"
        super().__init__(msg)


class InvalidConfiguration(LanderError, ValueError):
    """A configuration constant is non-finite or out of range."""
