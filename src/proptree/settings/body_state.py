"""Defines the translational body states that can be declared under ``bodies/<name>/initialState``."""

# ruff: noqa: UP007

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from typing import Annotated, Literal, Optional, Union

# Third Party Imports
from numpy import array, ndarray, pi
from pydantic import Field

# Local Imports
from ..physics.orbits import coe2cartesian
from .base import SettingsModel


class BodyStateBase(SettingsModel, ABC):
    """Abstract base class defines methods that all ``BodyState`` children classes should implement."""

    @abstractmethod
    def toCartesian(self, gravitational_parameter: Optional[float] = None) -> ndarray:
        """Convert this state into a 6x1 Cartesian state relative to the central body.

        Args:
            gravitational_parameter (``float``, optional): gravitational parameter of the central body.

        Returns:
            ``ndarray``: 6x1 Cartesian state.
        """
        raise NotImplementedError

    @property
    def requires_gravitational_parameter(self) -> bool:
        """``bool``: whether :meth:`.toCartesian` needs the central body's gravitational parameter."""
        return False


class CartesianBodyState(BodyStateBase):
    """Cartesian position & velocity relative to the central body."""

    type: Literal["cartesian"] = "cartesian"
    """``str``: type of state being defined."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0

    def toCartesian(self, gravitational_parameter: Optional[float] = None) -> ndarray:
        """Return the declared components as a 6x1 state."""
        return array([self.x, self.y, self.z, self.vx, self.vy, self.vz])


class KeplerianBodyState(BodyStateBase):
    R"""Classical orbital elements about the central body, angles in radians."""

    type: Literal["keplerian"] = "keplerian"
    R"""``str``: type of state being defined."""

    semi_major_axis: float = Field(..., gt=0.0)
    R"""``float``: semi-major axis, :math:`a`."""

    eccentricity: float = Field(default=0.0, ge=0.0, lt=1.0)
    R"""``float``: eccentricity, :math:`e\in[0,1)`."""

    inclination: float = Field(default=0.0, ge=0.0, le=pi)
    R"""``float``: inclination angle, :math:`i\in[0,\pi]`."""

    argument_of_periapsis: float = 0.0
    R"""``float``: argument of periapsis, :math:`\omega`."""

    longitude_of_ascending_node: float = 0.0
    R"""``float``: right ascension of the ascending node, :math:`\Omega`."""

    true_anomaly: float = 0.0
    R"""``float``: true anomaly, :math:`\nu`."""

    @property
    def requires_gravitational_parameter(self) -> bool:
        """``bool``: Keplerian elements always need the central body's gravitational parameter."""
        return True

    def toCartesian(self, gravitational_parameter: Optional[float] = None) -> ndarray:
        """Convert the elements into a 6x1 Cartesian state.

        Raises:
            ``ValueError``: if no `gravitational_parameter` is given
        """
        if gravitational_parameter is None:
            raise ValueError("Converting Keplerian elements requires a gravitational parameter")
        return coe2cartesian(
            self.semi_major_axis,
            self.eccentricity,
            self.inclination,
            self.longitude_of_ascending_node,
            self.argument_of_periapsis,
            self.true_anomaly,
            gravitational_parameter,
        )


BodyState = Annotated[
    Union[CartesianBodyState, KeplerianBodyState],
    Field(..., discriminator="type"),
]
"""Annotated[Union]: Discriminated union defining valid translational body states."""
