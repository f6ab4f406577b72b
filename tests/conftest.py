from __future__ import annotations

# Standard Library Imports
import logging
import sys
from typing import TYPE_CHECKING, Any

# Third Party Imports
import pytest

# PROPTREE Imports
from proptree.bodies import Body, BodyRegistry, ConstantEphemeris
from proptree.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from proptree.tree import ConfigTree

# Local Imports
from . import EARTH_MU, EARTH_STATE, MOON_STATE, MULTI_TYPE_TREE, POINT_MASS_ACCELERATIONS, copyTree

# Type Checking Imports
if TYPE_CHECKING:
    # PROPTREE Imports
    from proptree.common.logger import Logger


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the behavior config environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        BehavioralConfig.resetConfig()
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig.resetConfig()


@pytest.fixture(autouse=True)
def _resetPackageLogger() -> None:
    """Detach the handlers that the decoding & encoding entry points attach to the ``proptree`` logger."""
    package_logger = logging.getLogger("proptree")
    yield
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="body_registry")
def getBodyRegistry() -> BodyRegistry:
    """Return a :class:`.BodyRegistry` with constant ephemerides for the Sun, Earth & Moon.

    The ``Vehicle`` is registered without an ephemeris, so its states must come from the tree.
    """
    return BodyRegistry(
        [
            Body("Sun", ephemeris=ConstantEphemeris([0.0] * 6)),
            Body("Earth", gravitational_parameter=EARTH_MU, ephemeris=ConstantEphemeris(EARTH_STATE)),
            Body("Moon", ephemeris=ConstantEphemeris(MOON_STATE, frame_origin="Earth")),
            Body("Vehicle"),
        ],
    )


@pytest.fixture(name="multi_type_tree")
def getMultiTypeTree() -> ConfigTree:
    """Return a fresh :class:`.ConfigTree` with translational, mass & rotational propagators."""
    return ConfigTree(copyTree(MULTI_TYPE_TREE))


@pytest.fixture(name="moon_tree")
def getMoonTree() -> ConfigTree:
    """Return a fresh :class:`.ConfigTree` propagating the Moon about the Earth, without initial states."""
    data: dict[str, Any] = {
        "initialEpoch": 0.0,
        "finalEpoch": 86400.0,
        "bodies": {"Moon": {"initialState": [4.0e8, 0.0, 0.0, 0.0, 1.0e3, 0.0]}},
        "propagators": [
            {
                "integratedStateType": "translational",
                "bodiesToPropagate": ["Moon"],
                "centralBodies": ["Earth"],
                "accelerations": {"Moon": POINT_MASS_ACCELERATIONS["Vehicle"]},
            },
        ],
    }
    return ConfigTree(data)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest options without an .ini file."""
    config.addinivalue_line("markers", "ephemeris: mark test as depending on body ephemerides")
