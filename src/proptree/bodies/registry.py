"""Defines the read-only :class:`.BodyRegistry` queried for ephemeris-based initial states."""

from __future__ import annotations

# Standard Library Imports
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import concatenate, zeros

# Local Imports
from ..common.exceptions import MissingEphemerisError, UnknownBodyError
from ..common.logger import proptreeLogDebug, proptreeLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable, Iterator

    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from .ephemeris import Ephemeris


@dataclass(frozen=True)
class Body:
    """Body that may be propagated or act as a central body."""

    name: str
    """``str``: unique name of the body."""

    gravitational_parameter: float | None = None
    """``float``: gravitational parameter, required to convert Keplerian states about this body."""

    ephemeris: Ephemeris | None = None
    """:class:`.Ephemeris`: source of this body's state as a function of time."""


class BodyRegistry(Mapping):
    """Read-only collection of :class:`.Body` objects keyed by name."""

    def __init__(self, bodies: Iterable[Body] = ()) -> None:
        """Store `bodies`, keyed by their names."""
        self._bodies: dict[str, Body] = {}
        for body in bodies:
            if body.name in self._bodies:
                raise ValueError(f"Duplicate body name: {body.name!r}")
            self._bodies[body.name] = body

    def __getitem__(self, name: str) -> Body:
        """:class:`.Body`: body with the given `name`, see :meth:`.getBody`."""
        return self.getBody(name)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the registered body names."""
        return iter(self._bodies)

    def __len__(self) -> int:
        """``int``: number of registered bodies."""
        return len(self._bodies)

    def __contains__(self, name: object) -> bool:
        """``bool``: whether a body called `name` is registered."""
        return name in self._bodies

    def getBody(self, name: str) -> Body:
        """Return the body called `name`.

        Raises:
            :class:`.UnknownBodyError`: if no such body is registered
        """
        if name not in self._bodies:
            err = UnknownBodyError(name)
            proptreeLogError(str(err))
            raise err
        return self._bodies[name]

    def _stateRelativeToRoot(self, name: str, epoch: float) -> tuple[str, ndarray] | None:
        """Sum ephemeris states along the chain of frame origins starting at `name`.

        The chain stops at the first body that is unregistered or has no ephemeris; that body is
        the root the returned state is relative to. Returns ``None`` if the chain is cyclic.
        """
        state = zeros(6)
        current = name
        visited = set()
        while current not in visited:
            visited.add(current)
            body = self._bodies.get(current)
            if body is None or body.ephemeris is None:
                return current, state
            state = state + body.ephemeris.getCartesianState(epoch)
            current = body.ephemeris.frame_origin

        proptreeLogDebug(f"Cyclic ephemeris frame origins starting at body {name!r}")
        return None

    def findRelativeState(self, name: str, central_body: str, epoch: float) -> ndarray | None:
        """Return the state of `name` relative to `central_body` at `epoch`, if it can be determined.

        Args:
            name (``str``): body whose state is requested; must be registered with an ephemeris.
            central_body (``str``): body the returned state is relative to.
            epoch (``float``): epoch at which the ephemerides are evaluated.

        Returns:
            ``ndarray | None``: 6x1 Cartesian state, or ``None`` if the body is unknown, lacks an
            ephemeris, shares no frame origin with `central_body`, or if the frame origins are cyclic.
        """
        body = self._bodies.get(name)
        if body is None or body.ephemeris is None:
            proptreeLogDebug(f"No ephemeris available for body {name!r}")
            return None

        body_chain = self._stateRelativeToRoot(name, epoch)
        central_chain = self._stateRelativeToRoot(central_body, epoch)
        if body_chain is None or central_chain is None:
            return None

        body_root, body_state = body_chain
        central_root, central_state = central_chain
        if body_root != central_root:
            proptreeLogDebug(
                f"Ephemerides of {name!r} ({body_root!r}) and {central_body!r} ({central_root!r}) share no origin",
            )
            return None

        return body_state - central_state

    def getRelativeState(self, name: str, central_body: str, epoch: float) -> ndarray:
        """Return the state of `name` relative to `central_body` at `epoch`.

        Raises:
            :class:`.UnknownBodyError`: if `name` is not registered
            :class:`.MissingEphemerisError`: if the state cannot be determined from the ephemerides
        """
        self.getBody(name)
        state = self.findRelativeState(name, central_body, epoch)
        if state is None:
            msg = f"Cannot determine state of {name!r} relative to {central_body!r} from ephemerides"
            proptreeLogError(msg)
            raise MissingEphemerisError(msg)
        return state


def getInitialStatesOfBodies(
    bodies_to_propagate: list[str],
    central_bodies: list[str],
    body_registry: BodyRegistry,
    initial_epoch: float,
) -> ndarray | None:
    """Concatenate the ephemeris states of propagated bodies relative to their central bodies.

    Args:
        bodies_to_propagate (``list``): names of propagated bodies, in declaration order.
        central_bodies (``list``): one central body name per propagated body.
        body_registry (:class:`.BodyRegistry`): bodies & ephemerides.
        initial_epoch (``float``): epoch at which the ephemerides are evaluated.

    Returns:
        ``ndarray | None``: system initial state, or ``None`` if any body state is unavailable.
    """
    if len(bodies_to_propagate) != len(central_bodies) or not bodies_to_propagate:
        return None

    states = []
    for name, central_body in zip(bodies_to_propagate, central_bodies):
        state = body_registry.findRelativeState(name, central_body, initial_epoch)
        if state is None:
            return None
        states.append(state)

    return concatenate(states)
