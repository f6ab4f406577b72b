from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
import pytest
from numpy import allclose, concatenate

# PROPTREE Imports
from proptree.bodies import Body, BodyRegistry, ConstantEphemeris
from proptree.common.behavioral_config import BehavioralConfig
from proptree.common.exceptions import (
    InvalidNestingError,
    MissingStateSourceError,
    StateSizeError,
    UnknownBodyError,
    UnknownTagError,
    UnsupportedStateTypeError,
)
from proptree.physics.orbits import coe2cartesian
from proptree.resolution import determineInitialStates, getCartesianState
from proptree.tree import ConfigTree, KeyPath

# Local Imports
from .. import EARTH_MU, MOON_STATE, VEHICLE_ATTITUDE, VEHICLE_MASS, VEHICLE_STATE

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any


TREE_MOON_STATE: list[float] = [4.0e8, 0.0, 0.0, 0.0, 1.0e3, 0.0]
"""``list``: state of the Moon declared in the ``moon_tree`` fixture, differing from its ephemeris."""

KEPLERIAN_STATE: dict[str, float] = {"semiMajorAxis": 7.0e6, "eccentricity": 0.01, "trueAnomaly": 0.5}


def _vehicleTree(*propagators: dict[str, Any], **vehicle: Any) -> ConfigTree:
    """Return a tree with the given propagators, declaring the vehicle's `vehicle` states."""
    return ConfigTree({"bodies": {"Vehicle": vehicle}, "propagators": list(propagators)})


def _translational(bodies: list[str] | None = None, central_bodies: list[str] | None = None) -> dict[str, Any]:
    """Return a translational propagator object without initial states."""
    return {
        "integratedStateType": "translational",
        "bodiesToPropagate": bodies or ["Vehicle"],
        "centralBodies": central_bodies or ["Earth"],
        "accelerations": {},
    }


def _initialStates(tree: ConfigTree, index: int = 0) -> list[float]:
    return tree.get(KeyPath("propagators") / index / "initialStates")


@pytest.mark.ephemeris()
def testEphemerisSingleBlock(moon_tree: ConfigTree, body_registry: BodyRegistry):
    """Test that a single translational propagator takes its states from the ephemerides."""
    determineInitialStates(moon_tree, body_registry, 0.0)
    assert allclose(_initialStates(moon_tree), MOON_STATE)


@pytest.mark.ephemeris()
def testEphemerisDisabled(moon_tree: ConfigTree, body_registry: BodyRegistry):
    """Test that the ephemeris lookup can be turned off by configuration."""
    BehavioralConfig.getConfig().resolution.EphemerisInitialStates = False
    determineInitialStates(moon_tree, body_registry, 0.0)
    assert allclose(_initialStates(moon_tree), TREE_MOON_STATE)


@pytest.mark.parametrize(
    ("registry", "epoch"),
    [
        (None, 0.0),
        ("body_registry", None),
        # Registry without an ephemeris for the Moon
        (BodyRegistry([Body("Earth", gravitational_parameter=EARTH_MU)]), 0.0),
        # Ephemerides of the Earth & Moon defined relative to each other
        (
            BodyRegistry(
                [
                    Body("Earth", ephemeris=ConstantEphemeris([1.0] * 6, frame_origin="Moon")),
                    Body("Moon", ephemeris=ConstantEphemeris(MOON_STATE, frame_origin="Earth")),
                ],
            ),
            0.0,
        ),
    ],
)
def testEphemerisFallback(moon_tree: ConfigTree, request: pytest.FixtureRequest, registry: Any, epoch: Any):
    """Test that the tree's body states are used when the ephemeris lookup isn't possible."""
    if registry == "body_registry":
        registry = request.getfixturevalue("body_registry")
    determineInitialStates(moon_tree, registry, epoch)
    assert allclose(_initialStates(moon_tree), TREE_MOON_STATE)


@pytest.mark.ephemeris()
def testMultipleBlocksIgnoreEphemeris(moon_tree: ConfigTree, body_registry: BodyRegistry):
    """Test that ephemerides are never used when more than one propagator is defined."""
    moon_tree.set("bodies.Moon.mass", 7.35e22)
    moon_tree.get("propagators").append(
        {"integratedStateType": "mass", "bodiesToPropagate": ["Moon"], "massRateModels": {}},
    )

    determineInitialStates(moon_tree, body_registry, 0.0)
    assert allclose(_initialStates(moon_tree, 0), TREE_MOON_STATE)
    assert _initialStates(moon_tree, 1) == [7.35e22]


def testMultiTypeStates(multi_type_tree: ConfigTree):
    """Test that each state type is read from its own body key."""
    propagators = determineInitialStates(multi_type_tree)
    assert propagators is multi_type_tree.get("propagators")
    assert allclose(_initialStates(multi_type_tree, 0), VEHICLE_STATE)
    assert _initialStates(multi_type_tree, 1) == [VEHICLE_MASS]
    assert allclose(_initialStates(multi_type_tree, 2), VEHICLE_ATTITUDE)


def testExistingStatesUntouched(multi_type_tree: ConfigTree):
    """Test that propagators defining initial states are left as-is."""
    multi_type_tree.set(KeyPath("propagators") / 1 / "initialStates", [42.0])
    multi_type_tree.delete("bodies.Vehicle.mass")

    determineInitialStates(multi_type_tree)
    assert _initialStates(multi_type_tree, 1) == [42.0]
    assert allclose(_initialStates(multi_type_tree, 0), VEHICLE_STATE)


def testConcatenatedStates():
    """Test that the states of several bodies are concatenated in declaration order."""
    tree = _vehicleTree(_translational(["Vehicle", "Probe"], ["Earth", "Moon"]), initialState=list(VEHICLE_STATE))
    tree.set("bodies.Probe.initialState", [1.0] * 6)

    determineInitialStates(tree)
    assert allclose(_initialStates(tree), concatenate([VEHICLE_STATE, [1.0] * 6]))


def testDefaultStateType():
    """Test that propagators without a state type use the configured default."""
    propagator = {"bodiesToPropagate": ["Vehicle"], "centralBodies": ["Earth"]}
    tree = _vehicleTree(propagator, initialState=list(VEHICLE_STATE), mass=VEHICLE_MASS)
    determineInitialStates(tree)
    assert allclose(_initialStates(tree), VEHICLE_STATE)

    BehavioralConfig.getConfig().resolution.DefaultStateType = "mass"
    tree.delete(KeyPath("propagators") / 0 / "initialStates")
    determineInitialStates(tree)
    assert _initialStates(tree) == [VEHICLE_MASS]


def testMissingBodyState():
    """Test that a body state missing from both sources is reported with its key path."""
    tree = _vehicleTree({"integratedStateType": "mass", "bodiesToPropagate": ["Vehicle"]})
    with pytest.raises(MissingStateSourceError, match="'Vehicle'") as exc_info:
        determineInitialStates(tree)
    assert exc_info.value.key_path == "bodies.Vehicle.mass"


def testDottedBodyName():
    """Test that body names containing dots are looked up as a single key."""
    tree = ConfigTree(
        {
            "bodies": {"Sat.1": {"mass": 100.0, "initialState": list(VEHICLE_STATE)}},
            "propagators": [
                {"integratedStateType": "mass", "bodiesToPropagate": ["Sat.1"]},
                _translational(["Sat.1"]),
            ],
        },
    )
    determineInitialStates(tree)
    assert _initialStates(tree, 0) == [100.0]
    assert allclose(_initialStates(tree, 1), VEHICLE_STATE)


def testWrongStateSize():
    """Test that body states of the wrong size are reported with their key path."""
    tree = _vehicleTree(
        {"integratedStateType": "rotational", "bodiesToPropagate": ["Vehicle"]},
        rotationalState=[1.0, 0.0, 0.0, 0.0],
    )
    with pytest.raises(StateSizeError) as exc_info:
        determineInitialStates(tree)
    assert exc_info.value.label == "bodies.Vehicle.rotationalState"
    assert (exc_info.value.size, exc_info.value.expected) == (4, 7)


def testCentralBodyCount():
    """Test that translational propagators need one central body per propagated body."""
    tree = _vehicleTree(_translational(["Vehicle"], ["Earth", "Moon"]), initialState=list(VEHICLE_STATE))
    with pytest.raises(ValueError, match="one central body per propagated body"):
        determineInitialStates(tree)


@pytest.mark.parametrize(
    ("state_type", "error"),
    [
        ("hybrid", InvalidNestingError),
        ("custom", UnsupportedStateTypeError),
        ("warp", UnknownTagError),
    ],
)
def testUnsupportedStateTypes(state_type: str, error: type[Exception]):
    """Test that propagators without states must be of a supported state type."""
    tree = _vehicleTree({"integratedStateType": state_type, "bodiesToPropagate": ["Vehicle"]}, mass=VEHICLE_MASS)
    with pytest.raises(error):
        determineInitialStates(tree)


@pytest.mark.parametrize(
    ("declared", "expected"),
    [
        (list(VEHICLE_STATE), VEHICLE_STATE),
        ({"type": "cartesian", "x": 7.0e6, "vy": 7.546e3}, VEHICLE_STATE),
        ({"x": 7.0e6, "vy": 7.546e3}, VEHICLE_STATE),
        ({"type": "keplerian", **KEPLERIAN_STATE}, coe2cartesian(7.0e6, 0.01, 0.0, 0.0, 0.0, 0.5, EARTH_MU)),
        (KEPLERIAN_STATE, coe2cartesian(7.0e6, 0.01, 0.0, 0.0, 0.0, 0.5, EARTH_MU)),
    ],
)
def testDeclaredTranslationalStates(body_registry: BodyRegistry, declared: Any, expected: Any):
    """Test conversion of every form of declared translational body state."""
    tree = _vehicleTree(_translational(), initialState=declared)
    state_path = KeyPath.parse("bodies.Vehicle.initialState")
    assert allclose(getCartesianState(tree, state_path, "Vehicle", "Earth", body_registry), expected)

    determineInitialStates(tree, body_registry)
    assert allclose(_initialStates(tree), expected)


def testKeplerianStateSources(body_registry: BodyRegistry):
    """Test that Keplerian states need a registered central body with a gravitational parameter."""
    state_path = KeyPath.parse("bodies.Vehicle.initialState")
    tree = _vehicleTree(_translational(), initialState=KEPLERIAN_STATE)

    with pytest.raises(MissingStateSourceError):
        getCartesianState(tree, state_path, "Vehicle", "Earth", None)
    with pytest.raises(MissingStateSourceError):
        getCartesianState(tree, state_path, "Vehicle", "Moon", body_registry)
    with pytest.raises(UnknownBodyError):
        getCartesianState(tree, state_path, "Vehicle", "Mars", body_registry)
