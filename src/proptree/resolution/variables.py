"""Merge the dependent variables requested by several export targets."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..common.logger import proptreeLogDebug
from ..settings.variables import DependentVariableSettings

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable

    # Local Imports
    from ..settings.propagators import MultiTypePropagatorSettings
    from ..settings.variables import ExportSettings


def mergeDependentVariables(export_settings: Iterable[ExportSettings]) -> list[DependentVariableSettings]:
    """Collect the dependent variables of every export target, without duplicates.

    Variables are compared by :meth:`.DependentVariableSettings.getVariableId`; the first occurrence
    is kept, in declaration order. Epoch & state variables are not dependent variables, and are skipped.

    Args:
        export_settings (``Iterable``): export targets, in declaration order.

    Returns:
        ``list``: unique dependent variables.
    """
    added_ids: set[str] = set()
    dependent_variables: list[DependentVariableSettings] = []
    for export in export_settings:
        for variable in export.variables:
            if not isinstance(variable, DependentVariableSettings):
                continue

            variable_id = variable.getVariableId()
            if variable_id in added_ids:
                proptreeLogDebug(f"Skipping duplicate dependent variable {variable_id!r} of {export.file!r}")
                continue

            added_ids.add(variable_id)
            dependent_variables.append(variable)

    return dependent_variables


def resetDependentVariables(
    propagator_settings: MultiTypePropagatorSettings,
    export_settings: Iterable[ExportSettings],
) -> MultiTypePropagatorSettings:
    """Replace the dependent variables of `propagator_settings` by those to be exported.

    Returns:
        :class:`.MultiTypePropagatorSettings`: `propagator_settings`, updated in place.
    """
    propagator_settings.resetDependentVariables(mergeDependentVariables(export_settings))
    return propagator_settings
