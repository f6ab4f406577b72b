"""Well-known keys of the configuration tree."""

from __future__ import annotations

# Local Imports
from .tree import KeyPath


class Keys:
    """Keys of the root object."""

    INITIAL_EPOCH: str = "initialEpoch"
    FINAL_EPOCH: str = "finalEpoch"
    BODIES: str = "bodies"
    PROPAGATORS: str = "propagators"
    TERMINATION: str = "termination"
    OPTIONS: str = "options"
    EXPORT: str = "export"

    PRINT_INTERVAL: KeyPath = KeyPath(OPTIONS, "printInterval")
    """:class:`.KeyPath`: progress print interval, nested under :attr:`.OPTIONS`."""


class PropagatorKeys:
    """Keys of each object in the ``propagators`` list."""

    INTEGRATED_STATE_TYPE: str = "integratedStateType"
    BODIES_TO_PROPAGATE: str = "bodiesToPropagate"
    INITIAL_STATES: str = "initialStates"
    CENTRAL_BODIES: str = "centralBodies"
    TYPE: str = "type"
    ACCELERATIONS: str = "accelerations"
    MASS_RATE_MODELS: str = "massRateModels"
    TORQUES: str = "torques"
