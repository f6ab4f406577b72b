"""Resolve configuration trees into propagator settings, and back."""

from __future__ import annotations

# Local Imports
from .codec import (
    decodePropagatorSettings,
    decodeSingleArcPropagator,
    encodePropagatorSettings,
    encodeSingleArcPropagator,
)
from .initial_states import determineInitialStates, getCartesianState
from .termination import composeTermination, getTerminationEpoch
from .variables import mergeDependentVariables, resetDependentVariables

__all__ = [  # noqa: RUF022, RUF100
    "decodePropagatorSettings",
    "encodePropagatorSettings",
    "decodeSingleArcPropagator",
    "encodeSingleArcPropagator",
    "determineInitialStates",
    "getCartesianState",
    "composeTermination",
    "getTerminationEpoch",
    "mergeDependentVariables",
    "resetDependentVariables",
]
