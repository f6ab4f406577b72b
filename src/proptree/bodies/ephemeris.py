"""Defines ephemerides used to evaluate a body's state as a function of time."""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod

# Third Party Imports
from numpy import array, ndarray

# Local Imports
from ..physics.orbits import coe2cartesian, getMeanMotion, meanAnom2TrueAnom, trueAnom2MeanAnom

GLOBAL_FRAME_ORIGIN: str = "SSB"
"""``str``: default origin of ephemeris frames, the solar system barycenter."""


class Ephemeris(ABC):
    """Abstract base class for a body's ephemeris."""

    def __init__(self, frame_origin: str = GLOBAL_FRAME_ORIGIN) -> None:
        """Initialize the ephemeris.

        Args:
            frame_origin (``str``, optional): name of the body the returned states are relative to.
                Defaults to :data:`.GLOBAL_FRAME_ORIGIN`.
        """
        self.frame_origin = frame_origin

    @abstractmethod
    def getCartesianState(self, epoch: float) -> ndarray:
        """Return the 6x1 Cartesian state relative to :attr:`.frame_origin` at `epoch`."""
        raise NotImplementedError


class ConstantEphemeris(Ephemeris):
    """Ephemeris always returning the same state."""

    def __init__(self, state: list[float] | ndarray, frame_origin: str = GLOBAL_FRAME_ORIGIN) -> None:
        """Initialize the ephemeris with a fixed 6x1 Cartesian `state`."""
        super().__init__(frame_origin)
        self._state = array(state, dtype=float)
        if self._state.shape != (6,):
            raise ValueError(f"Constant ephemeris requires a 6x1 state, not {self._state.shape}")

    def getCartesianState(self, epoch: float) -> ndarray:
        """Return a copy of the fixed state, regardless of `epoch`."""
        return self._state.copy()


class KeplerEphemeris(Ephemeris):
    """Two-body ephemeris defined by classical orbital elements at a reference epoch."""

    def __init__(
        self,
        sma: float,
        ecc: float,
        inc: float,
        raan: float,
        argp: float,
        true_anom: float,
        reference_epoch: float,
        mu: float,
        frame_origin: str = GLOBAL_FRAME_ORIGIN,
    ) -> None:
        """Initialize the ephemeris.

        Args:
            sma (``float``): semi-major axis.
            ecc (``float``): eccentricity, elliptical orbits only.
            inc (``float``): inclination, radians.
            raan (``float``): right ascension of the ascending node, radians.
            argp (``float``): argument of periapsis, radians.
            true_anom (``float``): true anomaly at `reference_epoch`, radians.
            reference_epoch (``float``): epoch at which the elements are defined.
            mu (``float``): gravitational parameter of `frame_origin`.
            frame_origin (``str``, optional): name of the central body.
        """
        super().__init__(frame_origin)
        self.sma = sma
        self.ecc = ecc
        self.inc = inc
        self.raan = raan
        self.argp = argp
        self.reference_epoch = reference_epoch
        self.mu = mu
        self._mean_motion = getMeanMotion(sma, mu)
        self._mean_anom_0 = trueAnom2MeanAnom(true_anom, ecc)

    def getCartesianState(self, epoch: float) -> ndarray:
        """Propagate the reference elements to `epoch` and convert them to a Cartesian state."""
        mean_anom = self._mean_anom_0 + self._mean_motion * (epoch - self.reference_epoch)
        true_anom = meanAnom2TrueAnom(mean_anom, self.ecc)
        return coe2cartesian(self.sma, self.ecc, self.inc, self.raan, self.argp, true_anom, self.mu)
