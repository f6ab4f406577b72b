"""Strongly-typed settings produced by resolving a configuration tree."""

from __future__ import annotations

# Local Imports
from .body_state import BodyState, CartesianBodyState, KeplerianBodyState
from .propagators import (
    MassPropagatorSettings,
    MultiTypePropagatorSettings,
    PropagatorSettings,
    RotationalPropagatorSettings,
    SingleArcPropagatorSettings,
    TranslationalPropagatorSettings,
)
from .termination import (
    DependentVariableTerminationSettings,
    HybridTerminationSettings,
    TerminationSettings,
    TimeTerminationSettings,
    parseTerminationSettings,
)
from .variables import (
    DependentVariableSettings,
    EpochVariableSettings,
    ExportSettings,
    StateVariableSettings,
    VariableSettings,
)

__all__ = [  # noqa: RUF022, RUF100
    "BodyState",
    "CartesianBodyState",
    "KeplerianBodyState",
    "SingleArcPropagatorSettings",
    "TranslationalPropagatorSettings",
    "MassPropagatorSettings",
    "RotationalPropagatorSettings",
    "PropagatorSettings",
    "MultiTypePropagatorSettings",
    "TimeTerminationSettings",
    "DependentVariableTerminationSettings",
    "HybridTerminationSettings",
    "TerminationSettings",
    "parseTerminationSettings",
    "EpochVariableSettings",
    "StateVariableSettings",
    "DependentVariableSettings",
    "VariableSettings",
    "ExportSettings",
]
