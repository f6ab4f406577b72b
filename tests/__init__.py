"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from copy import deepcopy
from typing import Any

EARTH_MU: float = 3.986004418e14
"""``float``: gravitational parameter of the Earth, m^3/s^2."""

EARTH_STATE: tuple[float, ...] = (1.496e11, 0.0, 0.0, 0.0, 2.978e4, 0.0)
"""``tuple``: constant state of the Earth relative to the solar system barycenter."""

MOON_STATE: tuple[float, ...] = (3.844e8, 0.0, 0.0, 0.0, 1.022e3, 0.0)
"""``tuple``: constant state of the Moon relative to the Earth."""

VEHICLE_STATE: tuple[float, ...] = (7.0e6, 0.0, 0.0, 0.0, 7.546e3, 0.0)
"""``tuple``: initial state of the vehicle relative to the Earth, declared in the tree."""

VEHICLE_MASS: float = 500.0
"""``float``: initial mass of the vehicle, declared in the tree."""

VEHICLE_ATTITUDE: tuple[float, ...] = (1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.001)
"""``tuple``: quaternion & angular velocity of the vehicle, declared in the tree."""

POINT_MASS_ACCELERATIONS: dict[str, Any] = {"Vehicle": {"Earth": [{"type": "pointMassGravity"}]}}

MULTI_TYPE_TREE: dict[str, Any] = {
    "initialEpoch": 0.0,
    "finalEpoch": 86400.0,
    "bodies": {
        "Vehicle": {
            "initialState": list(VEHICLE_STATE),
            "mass": VEHICLE_MASS,
            "rotationalState": list(VEHICLE_ATTITUDE),
        },
    },
    "propagators": [
        {
            "integratedStateType": "translational",
            "bodiesToPropagate": ["Vehicle"],
            "centralBodies": ["Earth"],
            "accelerations": POINT_MASS_ACCELERATIONS,
        },
        {
            "integratedStateType": "mass",
            "bodiesToPropagate": ["Vehicle"],
            "massRateModels": {"Vehicle": [{"type": "fromThrust"}]},
        },
        {
            "integratedStateType": "rotational",
            "bodiesToPropagate": ["Vehicle"],
            "torques": {"Vehicle": {"Earth": [{"type": "secondOrderGravitational"}]}},
        },
    ],
    "options": {"printInterval": 3600.0},
}
"""``dict``: tree with one propagator of each supported state type, states declared under ``bodies``."""


def copyTree(tree: dict[str, Any]) -> dict[str, Any]:
    """Return a deep copy of `tree`, so tests can modify it freely."""
    return deepcopy(tree)
