"""Bodies, ephemerides, and the registry used to look up body states."""

from __future__ import annotations

# Local Imports
from .ephemeris import GLOBAL_FRAME_ORIGIN, ConstantEphemeris, Ephemeris, KeplerEphemeris
from .registry import Body, BodyRegistry, getInitialStatesOfBodies

__all__ = [
    "GLOBAL_FRAME_ORIGIN",
    "Body",
    "BodyRegistry",
    "ConstantEphemeris",
    "Ephemeris",
    "KeplerEphemeris",
    "getInitialStatesOfBodies",
]
