"""Defines conversions between classical orbital elements, anomalies, and Cartesian states.

Units are whatever the gravitational parameter is expressed in; angles are always radians.
"""

from __future__ import annotations

# Third Party Imports
from numpy import arctan2, array, concatenate, cos, fmod, ndarray, pi, sin, sqrt
from scipy.optimize import newton

# ruff: noqa: N803, N806

TWO_PI: float = 2.0 * pi

_ATOL: float = 1.48e-10
_MAX_ITER: int = 100


def _rot1(angle: float) -> ndarray:
    """3x3 rotation matrix about the first axis."""
    return array([[1, 0, 0], [0, cos(angle), sin(angle)], [0, -sin(angle), cos(angle)]])


def _rot3(angle: float) -> ndarray:
    """3x3 rotation matrix about the third axis."""
    return array([[cos(angle), sin(angle), 0], [-sin(angle), cos(angle), 0], [0, 0, 1]])


def _checkEccentricity(ecc: float) -> None:
    if not 0.0 <= ecc < 1.0:
        raise ValueError(f"Only elliptical orbits are supported, eccentricity: {ecc}")


def wrapAngle2Pi(angle: float) -> float:
    r"""Force `angle` into :math:`[0, 2\pi)`."""
    wrapped = fmod(angle, TWO_PI)
    return wrapped + TWO_PI if wrapped < 0.0 else wrapped


def _keplerEquation(E: float, M: float, ecc: float) -> float:
    return E - ecc * sin(E) - M


def _keplerEquationDerivative(E: float, M: float, ecc: float) -> float:
    return 1 - ecc * cos(E)


def meanAnom2EccAnom(M: float, ecc: float) -> float:
    r"""Solve Kepler's equation for the eccentric anomaly via Newton-Raphson.

    References:
        :cite:t:`vallado_2013_astro`, Algorithm 2

    Args:
        M (``float``): mean anomaly, :math:`M`, in radians.
        ecc (``float``): eccentricity, :math:`e\in[0,1)`.

    Returns:
        ``float``: eccentric anomaly, :math:`E\in[0, 2\pi)`, in radians.
    """
    _checkEccentricity(ecc)
    M = wrapAngle2Pi(M)
    E_0 = M - ecc if M > pi else M + ecc
    E = newton(
        _keplerEquation,
        E_0,
        fprime=_keplerEquationDerivative,
        args=(M, ecc),
        tol=_ATOL,
        maxiter=_MAX_ITER,
    )
    return wrapAngle2Pi(E)


def meanAnom2TrueAnom(M: float, ecc: float) -> float:
    r"""Convert mean anomaly to true anomaly, :math:`\nu\in[0, 2\pi)`."""
    E = meanAnom2EccAnom(M, ecc)
    nu = 2.0 * arctan2(sqrt(1.0 + ecc) * sin(E / 2.0), sqrt(1.0 - ecc) * cos(E / 2.0))
    return wrapAngle2Pi(nu)


def trueAnom2MeanAnom(nu: float, ecc: float) -> float:
    r"""Convert true anomaly to mean anomaly, :math:`M\in[0, 2\pi)`."""
    _checkEccentricity(ecc)
    E = 2.0 * arctan2(sqrt(1.0 - ecc) * sin(nu / 2.0), sqrt(1.0 + ecc) * cos(nu / 2.0))
    return wrapAngle2Pi(E - ecc * sin(E))


def getMeanMotion(sma: float, mu: float) -> float:
    """Return the mean motion of an elliptical orbit (radians per unit time)."""
    return sqrt(mu / sma**3)


def coe2cartesian(
    sma: float,
    ecc: float,
    inc: float,
    raan: float,
    argp: float,
    true_anom: float,
    mu: float,
) -> ndarray:
    r"""Convert a set of COEs to a Cartesian position and velocity vector.

    References:
        :cite:t:`vallado_2013_astro`, Sections 2-6, Pgs 116-120

    Args:
        sma (``float``): semi-major axis, :math:`a`.
        ecc (``float``): eccentricity, :math:`e\in[0,1)`.
        inc (``float``): inclination angle, :math:`i\in[0,\pi]` in radians.
        raan (``float``): right ascension of the ascending node, :math:`\Omega`, in radians.
        argp (``float``): argument of periapsis, :math:`\omega`, in radians.
        true_anom (``float``): true anomaly, :math:`\nu`, in radians.
        mu (``float``): gravitational parameter of the central body.

    Returns:
        ``ndarray``: 6x1 Cartesian state vector relative to the central body.
    """
    _checkEccentricity(ecc)
    cos_anom, sin_anom = cos(true_anom), sin(true_anom)
    p = sma * (1.0 - ecc**2)

    r_pqw = p / (1.0 + ecc * cos_anom) * array([cos_anom, sin_anom, 0.0])
    v_pqw = sqrt(mu / p) * array([-sin_anom, ecc + cos_anom, 0.0])

    rot_pqw2inertial = _rot3(-raan).dot(_rot1(-inc).dot(_rot3(-argp)))

    return concatenate([rot_pqw2inertial.dot(r_pqw), rot_pqw2inertial.dot(v_pqw)], axis=0)
