"""Map between a configuration tree & :class:`.MultiTypePropagatorSettings`, in both directions."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, Any

# Local Imports
from ..common.labels import IntegratedStateType, TranslationalPropagatorType
from ..common.logger import getPackageLogger, proptreeLogDebug, proptreeLogError
from ..keys import Keys, PropagatorKeys
from ..settings.propagators import (
    MassPropagatorSettings,
    MultiTypePropagatorSettings,
    RotationalPropagatorSettings,
    TranslationalPropagatorSettings,
)
from ..settings.termination import parseTerminationSettings
from ..settings.variables import ExportSettings
from ..state_types import StateTypeRegistry
from ..tree import ConfigTree, KeyPath
from .initial_states import determineInitialStates, getIntegratedStateType
from .termination import composeTermination
from .variables import resetDependentVariables

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable

    # Local Imports
    from ..bodies import BodyRegistry
    from ..settings.propagators import SingleArcPropagatorSettings


def _decodeTranslational(
    tree: ConfigTree,
    path: KeyPath,
    bodies_to_propagate: list[str],
    initial_states: list[float],
) -> TranslationalPropagatorSettings:
    return TranslationalPropagatorSettings(
        central_bodies=tree.get(path / PropagatorKeys.CENTRAL_BODIES),
        accelerations=tree.get(path / PropagatorKeys.ACCELERATIONS),
        bodies_to_propagate=bodies_to_propagate,
        initial_states=initial_states,
        type=tree.get(path / PropagatorKeys.TYPE, TranslationalPropagatorType.COWELL),
    )


def _decodeMass(
    tree: ConfigTree,
    path: KeyPath,
    bodies_to_propagate: list[str],
    initial_states: list[float],
) -> MassPropagatorSettings:
    return MassPropagatorSettings(
        mass_rate_models=tree.get(path / PropagatorKeys.MASS_RATE_MODELS),
        bodies_to_propagate=bodies_to_propagate,
        initial_states=initial_states,
    )


def _decodeRotational(
    tree: ConfigTree,
    path: KeyPath,
    bodies_to_propagate: list[str],
    initial_states: list[float],
) -> RotationalPropagatorSettings:
    return RotationalPropagatorSettings(
        torques=tree.get(path / PropagatorKeys.TORQUES),
        bodies_to_propagate=bodies_to_propagate,
        initial_states=initial_states,
    )


def _encodeTranslational(settings: TranslationalPropagatorSettings) -> dict[str, Any]:
    return {
        PropagatorKeys.TYPE: settings.type.value,
        PropagatorKeys.CENTRAL_BODIES: list(settings.central_bodies),
        PropagatorKeys.BODIES_TO_PROPAGATE: list(settings.bodies_to_propagate),
        PropagatorKeys.ACCELERATIONS: settings.accelerations,
    }


def _encodeMass(settings: MassPropagatorSettings) -> dict[str, Any]:
    return {
        PropagatorKeys.BODIES_TO_PROPAGATE: list(settings.bodies_to_propagate),
        PropagatorKeys.MASS_RATE_MODELS: settings.mass_rate_models,
    }


def _encodeRotational(settings: RotationalPropagatorSettings) -> dict[str, Any]:
    return {
        PropagatorKeys.BODIES_TO_PROPAGATE: list(settings.bodies_to_propagate),
        PropagatorKeys.TORQUES: settings.torques,
    }


_DECODERS: dict[IntegratedStateType, Callable[..., SingleArcPropagatorSettings]] = {
    IntegratedStateType.TRANSLATIONAL: _decodeTranslational,
    IntegratedStateType.MASS: _decodeMass,
    IntegratedStateType.ROTATIONAL: _decodeRotational,
}

_ENCODERS: dict[IntegratedStateType, Callable[..., dict[str, Any]]] = {
    IntegratedStateType.TRANSLATIONAL: _encodeTranslational,
    IntegratedStateType.MASS: _encodeMass,
    IntegratedStateType.ROTATIONAL: _encodeRotational,
}


def decodeSingleArcPropagator(tree: ConfigTree, path: KeyPath) -> SingleArcPropagatorSettings:
    """Build the propagator settings described by the object at `path`.

    Raises:
        :class:`.UnknownTagError`: if the declared state type isn't registered
        :class:`.InvalidNestingError`: if the declared state type is hybrid
        :class:`.UnsupportedStateTypeError`: if the declared state type is otherwise unsupported
        :class:`.KeyNotFoundError`: if a required key is missing, including the initial states

    Returns:
        :class:`.SingleArcPropagatorSettings`: settings of the declared state type.
    """
    state_type = StateTypeRegistry.requireSupported(getIntegratedStateType(tree, path))
    decoder = _DECODERS[state_type]
    return decoder(
        tree,
        path,
        tree.get(path / PropagatorKeys.BODIES_TO_PROPAGATE),
        tree.get(path / PropagatorKeys.INITIAL_STATES),
    )


def encodeSingleArcPropagator(settings: SingleArcPropagatorSettings) -> dict[str, Any]:
    """Return the configuration tree object describing `settings`.

    Raises:
        :class:`.InvalidNestingError`: if `settings` is a multi-type (hybrid) propagator

    Returns:
        ``dict``: propagator object, writing only the keys used by its state type.
    """
    state_type = StateTypeRegistry.requireSupported(settings.integrated_state_type)
    node: dict[str, Any] = {PropagatorKeys.INTEGRATED_STATE_TYPE: StateTypeRegistry.tagToString(state_type)}
    if settings.initial_states:
        node[PropagatorKeys.INITIAL_STATES] = list(settings.initial_states)
    node.update(_ENCODERS[state_type](settings))
    return node


def decodePropagatorSettings(
    tree: ConfigTree | dict[str, Any],
    body_registry: BodyRegistry | None = None,
    initial_epoch: float | None = None,
) -> MultiTypePropagatorSettings:
    """Resolve a configuration tree into multi-type propagator settings.

    Missing initial states are determined first, and written back into `tree`. The termination
    condition combines the declared ``termination`` with ``finalEpoch``, and the dependent
    variables are those requested by the ``export`` targets, without duplicates.

    Args:
        tree (:class:`.ConfigTree` | ``dict``): configuration tree.
        body_registry (:class:`.BodyRegistry`, optional): bodies with ephemerides, used to infer
            missing initial states.
        initial_epoch (``float``, optional): epoch at which the ephemerides are evaluated. Defaults
            to the tree's ``initialEpoch``, if any.

    Returns:
        :class:`.MultiTypePropagatorSettings`: resolved settings.
    """
    logger = getPackageLogger()
    if not isinstance(tree, ConfigTree):
        tree = ConfigTree(tree)

    propagators = tree.get(Keys.PROPAGATORS)
    if not isinstance(propagators, list) or not propagators:
        msg = f"{Keys.PROPAGATORS!r} must be a non-empty list of propagator objects"
        proptreeLogError(msg)
        raise ValueError(msg)

    state_paths = [KeyPath(Keys.PROPAGATORS, index, PropagatorKeys.INITIAL_STATES) for index in range(len(propagators))]
    if not all(tree.hasKey(path) for path in state_paths):
        if initial_epoch is None:
            initial_epoch = tree.get(Keys.INITIAL_EPOCH, None)
        determineInitialStates(tree, body_registry, initial_epoch)

    declared_condition = None
    if tree.hasKey(Keys.TERMINATION):
        declared_condition = parseTerminationSettings(tree.get(Keys.TERMINATION))
    termination = composeTermination(declared_condition, tree.get(Keys.FINAL_EPOCH, None))

    propagator_settings = MultiTypePropagatorSettings.fromPropagators(
        [decodeSingleArcPropagator(tree, KeyPath(Keys.PROPAGATORS, index)) for index in range(len(propagators))],
        termination,
        print_interval=tree.get(Keys.PRINT_INTERVAL, None),
    )

    if tree.hasKey(Keys.EXPORT):
        exports = [ExportSettings.model_validate(export) for export in tree.get(Keys.EXPORT)]
        resetDependentVariables(propagator_settings, exports)
        proptreeLogDebug(f"Saving {len(propagator_settings.dependent_variables)} dependent variables")

    logger.info(f"Decoded {len(propagators)} propagators")
    return propagator_settings


def encodePropagatorSettings(propagator_settings: MultiTypePropagatorSettings) -> ConfigTree:
    """Build the configuration tree describing `propagator_settings`.

    Propagators are written grouped by state type. The print interval is only written when set;
    the dependent variables are not written, since they are derived from the ``export`` targets.

    Raises:
        ``TypeError``: if `propagator_settings` isn't a :class:`.MultiTypePropagatorSettings`

    Returns:
        :class:`.ConfigTree`: new tree with ``propagators``, ``termination`` & ``options`` keys.
    """
    logger = getPackageLogger()
    if not isinstance(propagator_settings, MultiTypePropagatorSettings):
        msg = f"Expected multi-type propagator settings, not {type(propagator_settings).__name__}"
        proptreeLogError(msg)
        raise TypeError(msg)

    tree = ConfigTree()
    tree.set(
        Keys.PROPAGATORS,
        [encodeSingleArcPropagator(propagator) for propagator in propagator_settings.getPropagatorList()],
    )
    tree.set(Keys.TERMINATION, propagator_settings.termination.toTree())
    if propagator_settings.print_interval is not None:
        tree.set(Keys.PRINT_INTERVAL, propagator_settings.print_interval)

    logger.info(f"Encoded {len(tree.get(Keys.PROPAGATORS))} propagators")
    return tree
