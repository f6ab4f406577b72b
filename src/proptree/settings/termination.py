"""Submodule defining the termination conditions of a propagation."""

# ruff: noqa: UP007

from __future__ import annotations

# Standard Library Imports
from enum import Enum
from typing import Annotated, Any, Literal, Union

# Third Party Imports
from pydantic import Discriminator, Field, Tag, TypeAdapter, model_validator

# Local Imports
from ..common.labels import TerminationLabel
from .base import SettingsModel
from .variables import DependentVariableSettings


class TimeTerminationSettings(SettingsModel):
    """Stop once the propagation epoch reaches :attr:`.epoch`."""

    type: Literal["time"] = "time"
    """``str``: type of termination condition."""

    epoch: float
    """``float``: epoch at which the propagation stops."""


class DependentVariableTerminationSettings(SettingsModel):
    """Stop once a dependent variable crosses :attr:`.limit`."""

    type: Literal["dependentVariable"] = "dependentVariable"
    """``str``: type of termination condition."""

    variable: DependentVariableSettings
    """:class:`.DependentVariableSettings`: monitored variable."""

    limit: float
    """``float``: threshold value of :attr:`.variable`."""

    use_as_lower_limit: bool = False
    """``bool``: whether to stop when the variable drops below, rather than exceeds, :attr:`.limit`."""


class HybridTerminationSettings(SettingsModel):
    """Combination of several termination conditions.

    A bare list of conditions in the configuration tree is read as a hybrid condition that is
    fulfilled as soon as any of its conditions is.
    """

    type: Literal["hybrid"] = "hybrid"
    """``str``: type of termination condition."""

    conditions: list[TerminationSettings] = Field(..., min_length=1)
    """``list``: combined termination conditions, in declaration order."""

    fulfill_single_condition: bool = True
    """``bool``: stop when any condition is met if ``True``, only when all are met if ``False``."""

    @model_validator(mode="before")
    @classmethod
    def conditions_from_list(cls, data: Any) -> Any:
        """Accept a bare list of conditions."""
        if isinstance(data, list):
            return {"conditions": data}
        return data


def _terminationDiscriminator(value: Any) -> str | None:
    """Return the termination type tag of a raw tree value or a settings object.

    Raw objects without an explicit ``type`` are recognized by their keys.
    """
    if isinstance(value, list):
        return TerminationLabel.HYBRID.value
    if isinstance(value, dict):
        tag = value.get("type")
        if tag is None:
            if "conditions" in value:
                tag = TerminationLabel.HYBRID
            elif "variable" in value:
                tag = TerminationLabel.DEPENDENT_VARIABLE
            elif "epoch" in value:
                tag = TerminationLabel.TIME
    else:
        tag = getattr(value, "type", None)
    return tag.value if isinstance(tag, Enum) else tag


TerminationSettings = Annotated[
    Union[
        Annotated[TimeTerminationSettings, Tag(TerminationLabel.TIME.value)],
        Annotated[DependentVariableTerminationSettings, Tag(TerminationLabel.DEPENDENT_VARIABLE.value)],
        Annotated[HybridTerminationSettings, Tag(TerminationLabel.HYBRID.value)],
    ],
    Discriminator(_terminationDiscriminator),
]
"""Annotated[Union]: Discriminated union defining valid termination conditions."""

HybridTerminationSettings.model_rebuild()

_TERMINATION_ADAPTER: TypeAdapter = TypeAdapter(TerminationSettings)


def parseTerminationSettings(
    raw: Any,
) -> TimeTerminationSettings | DependentVariableTerminationSettings | HybridTerminationSettings:
    """Build a termination condition from its configuration tree representation.

    Args:
        raw (``dict | list``): tree value, or an already constructed condition.

    Raises:
        ``pydantic.ValidationError``: if `raw` does not describe a valid condition

    Returns:
        :class:`.TimeTerminationSettings` | :class:`.DependentVariableTerminationSettings` |
        :class:`.HybridTerminationSettings`: parsed condition
    """
    return _TERMINATION_ADAPTER.validate_python(raw)
