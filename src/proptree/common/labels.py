"""Hold common label types for easier importing."""

from __future__ import annotations

# Standard Library Imports
from enum import Enum


class IntegratedStateType(str, Enum):
    """Defines valid labels for the kinds of propagated state."""

    HYBRID: str = "hybrid"
    """``str``: structural grouping of several propagators, never a block payload."""

    TRANSLATIONAL: str = "translational"
    """``str``: Cartesian position & velocity."""

    ROTATIONAL: str = "rotational"
    """``str``: attitude quaternion & angular velocity."""

    MASS: str = "mass"
    """``str``: body mass."""

    CUSTOM: str = "custom"
    """``str``: user-defined state."""


class TranslationalPropagatorType(str, Enum):
    """Defines valid labels for translational equations of motion formulations."""

    COWELL: str = "cowell"
    """``str``: Cartesian equations of motion."""

    ENCKE: str = "encke"
    """``str``: deviation from a Keplerian reference orbit."""

    GAUSS_KEPLERIAN: str = "gaussKeplerian"
    """``str``: Gauss planetary equations in Keplerian elements."""

    GAUSS_MODIFIED_EQUINOCTIAL: str = "gaussModifiedEquinoctial"
    """``str``: Gauss planetary equations in modified equinoctial elements."""


class TerminationLabel(str, Enum):
    """Defines valid labels for termination condition types."""

    TIME: str = "time"
    """``str``: stop once the propagation epoch passes a value."""

    DEPENDENT_VARIABLE: str = "dependentVariable"
    """``str``: stop once a dependent variable crosses a limit."""

    HYBRID: str = "hybrid"
    """``str``: combination of several termination conditions."""


class BodyStateLabel(str, Enum):
    """Defines valid labels for translational body states declared in a configuration tree."""

    CARTESIAN: str = "cartesian"
    """``str``: Cartesian position & velocity."""

    KEPLERIAN: str = "keplerian"
    """``str``: classical orbital elements, angles in radians."""


class DependentVariableLabel(str, Enum):
    """Defines valid labels for dependent variables that may be saved during propagation."""

    MACH_NUMBER: str = "machNumber"
    ALTITUDE: str = "altitude"
    AIRSPEED: str = "airspeed"
    LOCAL_DENSITY: str = "localDensity"
    RELATIVE_SPEED: str = "relativeSpeed"
    RELATIVE_POSITION: str = "relativePosition"
    RELATIVE_DISTANCE: str = "relativeDistance"
    RELATIVE_VELOCITY: str = "relativeVelocity"
    TOTAL_ACCELERATION_NORM: str = "totalAccelerationNorm"
    TOTAL_ACCELERATION: str = "totalAcceleration"
    BODY_MASS: str = "bodyMass"
    KEPLERIAN_STATE: str = "keplerianState"
    MODIFIED_EQUINOCTIAL_STATE: str = "modifiedEquinoctialState"
    ROTATION_MATRIX_TO_BODY_FIXED_FRAME: str = "rotationMatrixToBodyFixedFrame"
