"""Contains all the custom-defined exceptions used in ``proptree``."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ..tree import KeyPath


class PropTreeError(Exception):
    """Base exception for every failure raised while resolving a configuration tree."""


class UnknownTagError(PropTreeError, ValueError):
    """Exception indicating a string has no registered state type mapping."""

    def __init__(self, tag: str) -> None:
        """Instantiate the exception for the unregistered `tag`."""
        super().__init__(tag)
        self.tag = tag

    def __str__(self) -> str:
        """``str``: string representation of this exception."""
        return f"Unknown integrated state type {self.tag!r}"


class UnsupportedStateTypeError(PropTreeError):
    """Exception indicating a registered state type that can't be used as a standalone propagator."""

    def __init__(self, state_type: str) -> None:
        """Instantiate the exception for the unsupported `state_type`."""
        super().__init__(state_type)
        self.state_type = state_type

    def __str__(self) -> str:
        """``str``: string representation of this exception."""
        return f"Integrated state type {self.state_type!r} is not supported for single propagators"


class InvalidNestingError(UnsupportedStateTypeError):
    """Exception indicating a hybrid propagator was given where a concrete propagator was expected."""

    def __init__(self, state_type: str = "hybrid") -> None:
        """Instantiate the exception, defaulting the offending state type to ``"hybrid"``."""
        super().__init__(state_type)

    def __str__(self) -> str:
        """``str``: string representation of this exception."""
        return (
            "Multi-type (hybrid) propagation is supported by providing a list of propagators, "
            "but hybrid propagators cannot be nested inside a multi-type propagator"
        )


class KeyNotFoundError(PropTreeError, KeyError):
    """Exception indicating a required key path is absent from a configuration tree."""

    def __init__(self, key_path: KeyPath) -> None:
        """Instantiate the exception for the missing `key_path`."""
        super().__init__(key_path)
        self.key_path = key_path

    def __str__(self) -> str:
        """``str``: string representation of this exception."""
        return f"Key {str(self.key_path)!r} is not defined"


class UnknownBodyError(PropTreeError, KeyError):
    """Exception indicating a body name is absent from a body registry."""

    def __init__(self, name: str) -> None:
        """Instantiate the exception for the missing body `name`."""
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        """``str``: string representation of this exception."""
        return f"Body {self.name!r} is not defined in the body registry"


class MissingEphemerisError(PropTreeError):
    """Exception indicating a body's state can't be evaluated from its ephemeris."""


class MissingStateSourceError(PropTreeError):
    """Exception indicating an initial state is absent from both the ephemerides and the tree."""

    def __init__(self, body: str, key_path: KeyPath) -> None:
        """Instantiate the exception for the propagated `body` whose state was expected at `key_path`."""
        super().__init__(body, key_path)
        self.body = body
        self.key_path = key_path

    def __str__(self) -> str:
        """``str``: string representation of this exception."""
        return f"Could not determine initial state of body {self.body!r}: {str(self.key_path)!r} is not defined"


class StateSizeError(PropTreeError, ValueError):
    """Exception indicating a state vector has the wrong number of elements."""

    def __init__(self, label: str, size: int, expected: int) -> None:
        """Instantiate the exception for the state at `label` with `size` instead of `expected` elements."""
        super().__init__(label, size, expected)
        self.label = label
        self.size = size
        self.expected = expected

    def __str__(self) -> str:
        """``str``: string representation of this exception."""
        return f"State {self.label!r} has {self.size} elements, expected {self.expected}"
