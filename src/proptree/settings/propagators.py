"""Submodule defining single-arc & multi-type propagator settings."""

# ruff: noqa: UP007

from __future__ import annotations

# Standard Library Imports
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

# Third Party Imports
from numpy import array, ndarray
from pydantic import Discriminator, Field, Tag, field_validator, model_validator
from typing_extensions import Self

# Local Imports
from ..common.exceptions import InvalidNestingError
from ..common.labels import IntegratedStateType, TranslationalPropagatorType
from ..state_types import StateTypeRegistry
from .base import SettingsModel
from .termination import TerminationSettings
from .variables import DependentVariableSettings


class SingleArcPropagatorSettings(SettingsModel):
    """Fields shared by the propagator of every concrete state type."""

    integrated_state_type: IntegratedStateType
    """``str``: type of state propagated by this propagator."""

    bodies_to_propagate: list[str] = Field(..., min_length=1)
    """``list``: names of the propagated bodies."""

    initial_states: Optional[list[float]] = None
    """``list``: system initial state, the bodies' states concatenated in :attr:`.bodies_to_propagate` order."""

    @field_validator("initial_states", mode="before")
    @classmethod
    def states_from_array(cls, value: Any) -> Any:
        """Accept numpy arrays of any shape, flattened."""
        if isinstance(value, ndarray):
            return value.flatten().tolist()
        return value

    @model_validator(mode="after")
    def validate_state_size(self) -> Self:
        """Validate that the initial states match the number of propagated bodies."""
        if self.initial_states is None:
            return self
        expected = StateTypeRegistry.getStateSize(self.integrated_state_type) * len(self.bodies_to_propagate)
        if len(self.initial_states) != expected:
            msg = f"'initialStates' has {len(self.initial_states)} elements, expected {expected}"
            raise ValueError(msg)
        return self

    @property
    def initial_state_vector(self) -> ndarray:
        """``ndarray``: :attr:`.initial_states` as a numpy array, empty if unset."""
        return array(self.initial_states or [], dtype=float)


class TranslationalPropagatorSettings(SingleArcPropagatorSettings):
    """Propagator of the Cartesian position & velocity of bodies."""

    integrated_state_type: Literal["translational"] = "translational"
    """``str``: type of state propagated by this propagator."""

    central_bodies: list[str]
    """``list``: central body of each propagated body."""

    accelerations: dict[str, Any]
    """``dict``: acceleration model selections, ``{body undergoing: {body exerting: [models]}}``."""

    type: TranslationalPropagatorType = TranslationalPropagatorType.COWELL
    """``str``: formulation of the translational equations of motion."""

    @model_validator(mode="after")
    def central_body_per_body(self) -> Self:
        """Validate that there is exactly one central body per propagated body."""
        if len(self.central_bodies) != len(self.bodies_to_propagate):
            msg = (
                f"{len(self.central_bodies)} central bodies given for "
                f"{len(self.bodies_to_propagate)} propagated bodies"
            )
            raise ValueError(msg)
        return self


class MassPropagatorSettings(SingleArcPropagatorSettings):
    """Propagator of the mass of bodies."""

    integrated_state_type: Literal["mass"] = "mass"
    """``str``: type of state propagated by this propagator."""

    mass_rate_models: dict[str, Any]
    """``dict``: mass rate model selections, ``{body: [models]}``."""


class RotationalPropagatorSettings(SingleArcPropagatorSettings):
    """Propagator of the attitude quaternion & angular velocity of bodies."""

    integrated_state_type: Literal["rotational"] = "rotational"
    """``str``: type of state propagated by this propagator."""

    torques: dict[str, Any]
    """``dict``: torque model selections, ``{body undergoing: {body exerting: [models]}}``."""


def _propagatorDiscriminator(value: Any) -> str | None:
    """Return the integrated state type tag of a raw tree value or a settings object."""
    if isinstance(value, dict):
        tag = value.get("integratedStateType", value.get("integrated_state_type"))
    else:
        tag = getattr(value, "integrated_state_type", None)
    return tag.value if isinstance(tag, Enum) else tag


PropagatorSettings = Annotated[
    Union[
        Annotated[TranslationalPropagatorSettings, Tag(IntegratedStateType.TRANSLATIONAL.value)],
        Annotated[MassPropagatorSettings, Tag(IntegratedStateType.MASS.value)],
        Annotated[RotationalPropagatorSettings, Tag(IntegratedStateType.ROTATIONAL.value)],
    ],
    Discriminator(_propagatorDiscriminator),
]
"""Annotated[Union]: Discriminated union defining valid single-arc propagators."""


class MultiTypePropagatorSettings(SettingsModel):
    """Propagation of any combination of state types, sharing one termination condition.

    Hybrid propagation is expressed by holding more than one propagator, so hybrid propagators
    can never be stored in :attr:`.propagators`.
    """

    propagators: dict[IntegratedStateType, list[PropagatorSettings]]
    """``dict``: propagators grouped by state type, declaration order preserved within each type."""

    termination: TerminationSettings
    """:class:`.TerminationSettings`: condition stopping the propagation."""

    dependent_variables: Optional[list[DependentVariableSettings]] = None
    """``list``: dependent variables recorded during propagation, unique by identity."""

    print_interval: Optional[float] = None
    """``float``: interval at which progress is printed; ``None`` keeps the integrator's default."""

    @model_validator(mode="before")
    @classmethod
    def reject_nested_hybrid(cls, data: Any) -> Any:
        """Raise :class:`.InvalidNestingError` if any propagator is a hybrid one."""
        if isinstance(data, dict):
            for state_type, propagators in (data.get("propagators") or {}).items():
                if str(getattr(state_type, "value", state_type)) == IntegratedStateType.HYBRID.value:
                    raise InvalidNestingError()
                if any(isinstance(propagator, MultiTypePropagatorSettings) for propagator in propagators):
                    raise InvalidNestingError()
        return data

    @model_validator(mode="after")
    def propagators_match_group(self) -> Self:
        """Validate that each propagator is grouped under its own state type."""
        for state_type, propagators in self.propagators.items():
            for propagator in propagators:
                if propagator.integrated_state_type != state_type:
                    msg = f"{propagator.integrated_state_type!r} propagator grouped under {state_type.value!r}"
                    raise ValueError(msg)
        return self

    @property
    def integrated_state_type(self) -> IntegratedStateType:
        """``str``: state type of a multi-type propagator, always hybrid."""
        return IntegratedStateType.HYBRID

    @classmethod
    def fromPropagators(
        cls,
        propagators: list[SingleArcPropagatorSettings],
        termination: TerminationSettings,
        dependent_variables: list[DependentVariableSettings] | None = None,
        print_interval: float | None = None,
    ) -> MultiTypePropagatorSettings:
        """Group a flat list of `propagators` by state type and build the multi-type settings.

        Raises:
            :class:`.InvalidNestingError`: if a multi-type propagator is given in `propagators`
        """
        grouped: dict[IntegratedStateType, list[SingleArcPropagatorSettings]] = {}
        for propagator in propagators:
            state_type = IntegratedStateType(propagator.integrated_state_type)
            if state_type == IntegratedStateType.HYBRID:
                raise InvalidNestingError()
            grouped.setdefault(state_type, []).append(propagator)

        return cls(
            propagators=grouped,
            termination=termination,
            dependent_variables=dependent_variables,
            print_interval=print_interval,
        )

    def getPropagatorList(self) -> list[SingleArcPropagatorSettings]:
        """``list``: propagators flattened in state type order, declaration order preserved within each type."""
        return [
            propagator
            for state_type in IntegratedStateType
            for propagator in self.propagators.get(state_type, [])
        ]

    def resetDependentVariables(self, dependent_variables: list[DependentVariableSettings]) -> None:
        """Replace the recorded dependent variables."""
        self.dependent_variables = list(dependent_variables)
