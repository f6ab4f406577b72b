"""Compose the termination condition of a propagation from the user's conditions & the final epoch."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import KeyNotFoundError
from ..common.logger import proptreeLogDebug, proptreeLogError
from ..keys import Keys
from ..settings.termination import HybridTerminationSettings, TimeTerminationSettings
from ..tree import KeyPath

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ..settings.termination import TerminationSettings


def _hasTimeCondition(condition: TerminationSettings) -> bool:
    """Return whether `condition` is a time condition, or a hybrid condition directly containing one.

    Nested hybrid conditions are not searched.
    """
    if isinstance(condition, TimeTerminationSettings):
        return True
    if isinstance(condition, HybridTerminationSettings):
        return any(isinstance(child, TimeTerminationSettings) for child in condition.conditions)
    return False


def composeTermination(
    declared_condition: TerminationSettings | None,
    final_epoch: float | None,
) -> TerminationSettings:
    """Build the termination condition of a propagation.

    A time condition stopping at `final_epoch` is added when the user declared no condition, or
    when `final_epoch` is given and the user's condition has no time condition. If both the user's
    condition and the added time condition exist, the propagation stops when either is fulfilled.

    Args:
        declared_condition (:class:`.TerminationSettings`, optional): user-declared condition.
        final_epoch (``float``, optional): final epoch declared in the tree.

    Raises:
        :class:`.KeyNotFoundError`: if neither a condition nor the final epoch is declared

    Returns:
        :class:`.TerminationSettings`: `declared_condition`, a time condition, or a hybrid of both.
    """
    conditions: list[TerminationSettings] = []
    if declared_condition is not None:
        conditions.append(declared_condition)

    if declared_condition is None or (final_epoch is not None and not _hasTimeCondition(declared_condition)):
        if final_epoch is None:
            err = KeyNotFoundError(KeyPath(Keys.FINAL_EPOCH))
            proptreeLogError(f"No termination condition declared: {err}")
            raise err
        proptreeLogDebug(f"Adding time termination condition at final epoch {final_epoch}")
        conditions.append(TimeTerminationSettings(epoch=final_epoch))

    if len(conditions) == 1:
        return conditions[0]

    return HybridTerminationSettings(conditions=conditions, fulfill_single_condition=True)


def getTerminationEpoch(condition: TerminationSettings) -> float | None:
    """Return the epoch of the first time condition found depth-first in `condition`.

    Returns:
        ``float | None``: termination epoch, or ``None`` if `condition` contains no time condition.
    """
    if isinstance(condition, TimeTerminationSettings):
        return condition.epoch

    if isinstance(condition, HybridTerminationSettings):
        for child in condition.conditions:
            epoch = getTerminationEpoch(child)
            if epoch is not None:
                return epoch

    return None
