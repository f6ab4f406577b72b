"""Submodule defining the variables that can be exported during propagation."""

# ruff: noqa: UP007

from __future__ import annotations

# Standard Library Imports
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

# Third Party Imports
from pydantic import Discriminator, Field, Tag

# Local Imports
from ..common.labels import DependentVariableLabel
from .base import SettingsModel


class EpochVariableSettings(SettingsModel):
    """Export of the propagation epoch."""

    type: Literal["epoch"] = "epoch"
    """``str``: type of exported variable."""


class StateVariableSettings(SettingsModel):
    """Export of the full propagated state."""

    type: Literal["state"] = "state"
    """``str``: type of exported variable."""


class DependentVariableSettings(SettingsModel):
    """Export of a single quantity derived from the propagated state."""

    type: Literal["dependent"] = "dependent"
    """``str``: type of exported variable."""

    dependent_variable: DependentVariableLabel
    """``str``: quantity being recorded."""

    body: str
    """``str``: body the quantity belongs to."""

    relative_to_body: Optional[str] = None
    """``str``: secondary body the quantity is measured with respect to, if any."""

    component_index: Optional[int] = Field(default=None, ge=0)
    """``int``: single component to record for vectorial quantities, if any."""

    def getVariableId(self) -> str:
        """Return the identity of this variable, unique per recorded quantity.

        Examples:
            ``altitude@Earth``, ``relativePosition@Moon-Earth[2]``

        Returns:
            ``str``: identity built from the quantity, owning body, secondary body & component.
        """
        identity = f"{self.dependent_variable.value}@{self.body}"
        if self.relative_to_body:
            identity += f"-{self.relative_to_body}"
        if self.component_index is not None:
            identity += f"[{self.component_index}]"
        return identity


def _variableDiscriminator(value: Any) -> str | None:
    """Return the variable type tag of a raw tree value or a settings object."""
    if isinstance(value, dict):
        tag = value.get("type")
        if tag is None and ("dependentVariable" in value or "dependent_variable" in value):
            tag = "dependent"
    else:
        tag = getattr(value, "type", None)
    return tag.value if isinstance(tag, Enum) else tag


VariableSettings = Annotated[
    Union[
        Annotated[EpochVariableSettings, Tag("epoch")],
        Annotated[StateVariableSettings, Tag("state")],
        Annotated[DependentVariableSettings, Tag("dependent")],
    ],
    Discriminator(_variableDiscriminator),
]
"""Annotated[Union]: Discriminated union defining valid exported variables."""


class ExportSettings(SettingsModel):
    """Configuration section defining one export target (a results file)."""

    file: str
    """``str``: path of the file the variables are written to."""

    variables: list[VariableSettings] = Field(default_factory=list)
    """``list``: variables written to :attr:`.file`, in column order."""

    header: str = ""
    """``str``: text written at the top of :attr:`.file`."""

    epochs_in_first_column: bool = False
    """``bool``: whether the epochs are written as the first column."""

    only_initial_step: bool = False
    """``bool``: whether only the values at the initial epoch are written."""

    only_final_step: bool = False
    """``bool``: whether only the values at the final epoch are written."""

    numerical_precision: int = Field(default=15, gt=0)
    """``int``: number of significant digits written."""
