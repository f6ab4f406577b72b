"""Fill in the initial states that the propagators of a configuration tree leave undefined.

When the tree defines exactly one propagator, a translational one without initial states, the
states are first looked up in the ephemerides of the body registry at the initial epoch. If that
isn't possible, or the tree defines any other number of propagators, each missing initial state is
assembled from the states declared under ``bodies/<name>``.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, Any

# Third Party Imports
from numpy import array, ndarray, zeros
from pydantic import TypeAdapter

# Local Imports
from ..bodies import getInitialStatesOfBodies
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import MissingStateSourceError, StateSizeError
from ..common.labels import BodyStateLabel, IntegratedStateType
from ..common.logger import proptreeLogDebug, proptreeLogError
from ..keys import Keys, PropagatorKeys
from ..settings.body_state import BodyState
from ..state_types import StateTypeRegistry
from ..tree import KeyPath

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ..bodies import BodyRegistry
    from ..tree import ConfigTree


_BODY_STATE_ADAPTER: TypeAdapter = TypeAdapter(BodyState)

_KEPLERIAN_KEYS: frozenset[str] = frozenset({"semiMajorAxis", "semi_major_axis"})


def getIntegratedStateType(tree: ConfigTree, propagator_path: KeyPath) -> IntegratedStateType:
    """Return the state type of the propagator at `propagator_path`, applying the configured default.

    Raises:
        :class:`.UnknownTagError`: if the declared state type isn't registered
    """
    default = BehavioralConfig.getConfig().resolution.DefaultStateType
    tag = tree.get(propagator_path / PropagatorKeys.INTEGRATED_STATE_TYPE, default)
    return StateTypeRegistry.stringToTag(tag)


def _ephemerisInitialStates(
    tree: ConfigTree,
    propagator_path: KeyPath,
    body_registry: BodyRegistry,
    initial_epoch: float,
) -> ndarray | None:
    """Return the initial states of a translational propagator from the body ephemerides, if available."""
    bodies_path = propagator_path / PropagatorKeys.BODIES_TO_PROPAGATE
    central_path = propagator_path / PropagatorKeys.CENTRAL_BODIES
    if not tree.hasKey(bodies_path) or not tree.hasKey(central_path):
        return None

    return getInitialStatesOfBodies(
        tree.get(bodies_path),
        tree.get(central_path),
        body_registry,
        initial_epoch,
    )


def getCartesianState(
    tree: ConfigTree,
    state_path: KeyPath,
    body: str,
    central_body: str,
    body_registry: BodyRegistry | None,
) -> ndarray:
    """Return the translational state declared at `state_path` as a Cartesian state.

    Args:
        tree (:class:`.ConfigTree`): configuration tree.
        state_path (:class:`.KeyPath`): path of the declared state, a 6-vector or a state object.
        body (``str``): name of the body whose state is declared.
        central_body (``str``): body the state is relative to.
        body_registry (:class:`.BodyRegistry`, optional): source of the central body's gravitational
            parameter, only required for Keplerian states.

    Raises:
        :class:`.UnknownBodyError`: if a Keplerian state's central body is not registered
        :class:`.MissingStateSourceError`: if a Keplerian state's central body has no gravitational parameter

    Returns:
        ``ndarray``: 6x1 Cartesian state relative to `central_body`.
    """
    raw: Any = tree.get(state_path)
    if not isinstance(raw, dict):
        return array(raw, dtype=float).flatten()

    if "type" not in raw:
        label = BodyStateLabel.KEPLERIAN if _KEPLERIAN_KEYS & raw.keys() else BodyStateLabel.CARTESIAN
        raw = {"type": label.value, **raw}
    body_state = _BODY_STATE_ADAPTER.validate_python(raw)

    gravitational_parameter = None
    if body_state.requires_gravitational_parameter:
        if body_registry is not None:
            gravitational_parameter = body_registry.getBody(central_body).gravitational_parameter
        if gravitational_parameter is None:
            proptreeLogError(f"Gravitational parameter of {central_body!r} needed to convert {str(state_path)!r}")
            raise MissingStateSourceError(body, state_path)

    return body_state.toCartesian(gravitational_parameter)


def _treeInitialStates(
    tree: ConfigTree,
    propagator_path: KeyPath,
    state_type: IntegratedStateType,
    body_registry: BodyRegistry | None,
) -> ndarray:
    """Assemble the initial states of one propagator from the body states declared in the tree."""
    state_type = StateTypeRegistry.requireSupported(state_type)
    state_size = StateTypeRegistry.getStateSize(state_type)
    state_key = StateTypeRegistry.getAssociatedKey(state_type)

    bodies_to_propagate = tree.get(propagator_path / PropagatorKeys.BODIES_TO_PROPAGATE)
    central_bodies = []
    if state_type == IntegratedStateType.TRANSLATIONAL:
        central_bodies = tree.get(propagator_path / PropagatorKeys.CENTRAL_BODIES)
        if len(central_bodies) != len(bodies_to_propagate):
            msg = (
                f"{str(propagator_path / PropagatorKeys.CENTRAL_BODIES)!r} must name one central body "
                f"per propagated body, got {len(central_bodies)} for {len(bodies_to_propagate)}"
            )
            proptreeLogError(msg)
            raise ValueError(msg)

    initial_states = zeros(state_size * len(bodies_to_propagate))
    for index, body in enumerate(bodies_to_propagate):
        state_path = KeyPath(Keys.BODIES, body, state_key)
        if not tree.hasKey(state_path):
            err = MissingStateSourceError(body, state_path)
            proptreeLogError(str(err))
            raise err

        if state_type == IntegratedStateType.TRANSLATIONAL:
            body_state = getCartesianState(tree, state_path, body, central_bodies[index], body_registry)
        else:
            body_state = array(tree.get(state_path), dtype=float).flatten()

        if body_state.size != state_size:
            err = StateSizeError(str(state_path), body_state.size, state_size)
            proptreeLogError(str(err))
            raise err

        initial_states[index * state_size : (index + 1) * state_size] = body_state

    return initial_states


def determineInitialStates(
    tree: ConfigTree,
    body_registry: BodyRegistry | None = None,
    initial_epoch: float | None = None,
) -> list[dict[str, Any]]:
    """Determine the initial states of the propagators of `tree` that don't define them.

    The inferred states are written back to the propagators of `tree`; propagators that already
    define initial states are left untouched.

    Args:
        tree (:class:`.ConfigTree`): configuration tree, updated in place.
        body_registry (:class:`.BodyRegistry`, optional): bodies with ephemerides. The ephemeris
            lookup is skipped if not given.
        initial_epoch (``float``, optional): epoch at which the ephemerides are evaluated. The
            ephemeris lookup is skipped if not given.

    Raises:
        :class:`.MissingStateSourceError`: if a body state is defined neither by the ephemerides nor
            the tree
        :class:`.UnknownTagError`: if a propagator declares an unregistered state type
        :class:`.UnsupportedStateTypeError`: if a propagator without initial states has an
            unsupported state type

    Returns:
        ``list``: propagator objects of `tree`, by reference.
    """
    propagators = tree.get(Keys.PROPAGATORS)
    propagators_path = KeyPath(Keys.PROPAGATORS)

    used_ephemeris = False
    if (
        len(propagators) == 1
        and body_registry is not None
        and initial_epoch is not None
        and BehavioralConfig.getConfig().resolution.EphemerisInitialStates
    ):
        propagator_path = propagators_path / 0
        if not tree.hasKey(propagator_path / PropagatorKeys.INITIAL_STATES):
            state_type = getIntegratedStateType(tree, propagator_path)
            if state_type == IntegratedStateType.TRANSLATIONAL:
                initial_states = _ephemerisInitialStates(tree, propagator_path, body_registry, initial_epoch)
                if initial_states is None:
                    proptreeLogDebug("Ephemeris initial states unavailable, using body states of the tree")
                else:
                    tree.set(propagator_path / PropagatorKeys.INITIAL_STATES, initial_states.tolist())
                    proptreeLogDebug(f"Initial states of {str(propagator_path)!r} set from ephemerides")
                    used_ephemeris = True

    if not used_ephemeris:
        for index in range(len(propagators)):
            propagator_path = propagators_path / index
            if tree.hasKey(propagator_path / PropagatorKeys.INITIAL_STATES):
                continue

            state_type = getIntegratedStateType(tree, propagator_path)
            initial_states = _treeInitialStates(tree, propagator_path, state_type, body_registry)
            tree.set(propagator_path / PropagatorKeys.INITIAL_STATES, initial_states.tolist())
            proptreeLogDebug(f"Initial states of {str(propagator_path)!r} set from body states")

    return propagators
