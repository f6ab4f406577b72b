"""Defines the :class:`.StateTypeRegistry`, mapping integrated state types to their tags & properties."""

from __future__ import annotations

# Standard Library Imports
from types import MappingProxyType
from typing import TYPE_CHECKING

# Local Imports
from .common.exceptions import InvalidNestingError, UnknownTagError, UnsupportedStateTypeError
from .common.labels import IntegratedStateType
from .common.logger import proptreeLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Mapping


class StateTypeRegistry:
    """Read-only lookup tables describing every :class:`.IntegratedStateType`.

    The tables are built once at import and are safe to share between callers.
    """

    TAGS: Mapping[IntegratedStateType, str] = MappingProxyType(
        {
            IntegratedStateType.HYBRID: "hybrid",
            IntegratedStateType.TRANSLATIONAL: "translational",
            IntegratedStateType.ROTATIONAL: "rotational",
            IntegratedStateType.MASS: "mass",
            IntegratedStateType.CUSTOM: "custom",
        },
    )
    """``Mapping``: string tag of each state type."""

    UNSUPPORTED: frozenset[IntegratedStateType] = frozenset(
        # propagators nested in a multi-type propagator cannot be hybrid
        {IntegratedStateType.HYBRID, IntegratedStateType.CUSTOM},
    )
    """``frozenset``: registered state types that can't be used as a single propagator."""

    STATE_SIZES: Mapping[IntegratedStateType, int] = MappingProxyType(
        {
            IntegratedStateType.TRANSLATIONAL: 6,
            IntegratedStateType.ROTATIONAL: 7,
            IntegratedStateType.MASS: 1,
        },
    )
    """``Mapping``: number of state elements per propagated body."""

    BODY_STATE_KEYS: Mapping[IntegratedStateType, str] = MappingProxyType(
        {
            IntegratedStateType.TRANSLATIONAL: "initialState",
            IntegratedStateType.MASS: "mass",
            IntegratedStateType.ROTATIONAL: "rotationalState",
        },
    )
    """``Mapping``: key under ``bodies/<name>`` holding a body's state of each type."""

    _FROM_TAG: Mapping[str, IntegratedStateType] = MappingProxyType({tag: kind for kind, tag in TAGS.items()})

    @classmethod
    def tagToString(cls, state_type: IntegratedStateType) -> str:
        """Return the string tag of `state_type`."""
        return cls.TAGS[cls.stringToTag(state_type)]

    @classmethod
    def stringToTag(cls, tag: str | IntegratedStateType) -> IntegratedStateType:
        """Return the state type registered under `tag`.

        Raises:
            :class:`.UnknownTagError`: if `tag` has no registered mapping
        """
        if isinstance(tag, IntegratedStateType):
            return tag
        if not isinstance(tag, str) or tag not in cls._FROM_TAG:
            err = UnknownTagError(tag)
            proptreeLogError(str(err))
            raise err
        return cls._FROM_TAG[tag]

    @classmethod
    def isSupported(cls, state_type: IntegratedStateType) -> bool:
        """``bool``: whether `state_type` can be used as a single propagator."""
        return cls.stringToTag(state_type) not in cls.UNSUPPORTED

    @classmethod
    def getStateSize(cls, state_type: IntegratedStateType) -> int:
        """Return the number of state elements per propagated body.

        Raises:
            :class:`.UnsupportedStateTypeError`: for state types without a fixed size
        """
        state_type = cls.stringToTag(state_type)
        if state_type not in cls.STATE_SIZES:
            raise UnsupportedStateTypeError(cls.tagToString(state_type))
        return cls.STATE_SIZES[state_type]

    @classmethod
    def getAssociatedKey(cls, state_type: IntegratedStateType) -> str:
        """Return the body key holding a state of `state_type`.

        Raises:
            :class:`.UnsupportedStateTypeError`: for state types without an associated body key
        """
        state_type = cls.stringToTag(state_type)
        if state_type not in cls.BODY_STATE_KEYS:
            raise UnsupportedStateTypeError(cls.tagToString(state_type))
        return cls.BODY_STATE_KEYS[state_type]

    @classmethod
    def requireSupported(cls, state_type: IntegratedStateType) -> IntegratedStateType:
        """Return `state_type` if it can be used as a single propagator.

        Raises:
            :class:`.InvalidNestingError`: if `state_type` is hybrid
            :class:`.UnsupportedStateTypeError`: for any other unsupported state type
        """
        state_type = cls.stringToTag(state_type)
        if state_type == IntegratedStateType.HYBRID:
            err = InvalidNestingError()
        elif state_type in cls.UNSUPPORTED:
            err = UnsupportedStateTypeError(cls.tagToString(state_type))
        else:
            return state_type

        proptreeLogError(str(err))
        raise err
