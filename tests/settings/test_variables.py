from __future__ import annotations

# Third Party Imports
import pytest
from pydantic import ValidationError

# PROPTREE Imports
from proptree.common.labels import DependentVariableLabel
from proptree.settings import (
    DependentVariableSettings,
    EpochVariableSettings,
    ExportSettings,
    StateVariableSettings,
)


@pytest.mark.parametrize(
    ("raw", "variable_id"),
    [
        ({"dependentVariable": "altitude", "body": "Vehicle"}, "altitude@Vehicle"),
        (
            {"dependentVariable": "relativeDistance", "body": "Vehicle", "relativeToBody": "Moon"},
            "relativeDistance@Vehicle-Moon",
        ),
        (
            {"dependentVariable": "relativePosition", "body": "Moon", "relativeToBody": "Earth", "componentIndex": 2},
            "relativePosition@Moon-Earth[2]",
        ),
        (
            {"dependentVariable": "totalAcceleration", "body": "Vehicle", "componentIndex": 0},
            "totalAcceleration@Vehicle[0]",
        ),
    ],
)
def testVariableId(raw: dict, variable_id: str):
    """Test the identity string of dependent variables."""
    assert DependentVariableSettings.model_validate(raw).getVariableId() == variable_id


def testVariableIdDistinguishesBodies():
    """Test that the same quantity of different bodies has different identities."""
    first = DependentVariableSettings(dependent_variable=DependentVariableLabel.ALTITUDE, body="Vehicle")
    second = DependentVariableSettings(dependent_variable=DependentVariableLabel.ALTITUDE, body="Moon")
    assert first.getVariableId() != second.getVariableId()


@pytest.mark.parametrize(
    "invalid",
    [
        {"dependentVariable": "warpFactor", "body": "Vehicle"},
        {"dependentVariable": "altitude"},
        {"dependentVariable": "relativePosition", "body": "Vehicle", "componentIndex": -1},
    ],
)
def testInvalidDependentVariable(invalid: dict):
    """Test that malformed dependent variables are rejected."""
    with pytest.raises(ValidationError):
        DependentVariableSettings.model_validate(invalid)


def testExportSettings():
    """Test export targets, inferring dependent variables from their keys."""
    export = ExportSettings.model_validate(
        {
            "file": "results.txt",
            "variables": [
                {"type": "epoch"},
                {"type": "state"},
                {"dependentVariable": "altitude", "body": "Vehicle"},
                {"type": "dependent", "dependentVariable": "airspeed", "body": "Vehicle"},
            ],
            "epochsInFirstColumn": True,
            "numericalPrecision": 10,
        },
    )
    assert [type(variable) for variable in export.variables] == [
        EpochVariableSettings,
        StateVariableSettings,
        DependentVariableSettings,
        DependentVariableSettings,
    ]
    assert export.epochs_in_first_column
    assert not export.only_final_step
    assert export.numerical_precision == 10
    assert export.header == ""


def testExportSettingsDefaults():
    """Test that an export target only requires a file."""
    export = ExportSettings(file="results.txt")
    assert export.variables == []
    assert export.numerical_precision == 15

    with pytest.raises(ValidationError):
        ExportSettings.model_validate({"file": "results.txt", "numericalPrecision": 0})
    with pytest.raises(ValidationError):
        ExportSettings.model_validate({"file": "results.txt", "variables": [{"type": "unknown"}]})
    with pytest.raises(ValidationError):
        ExportSettings.model_validate({"variables": []})


def testVariableToTree():
    """Test that variables are written with the tree's camelCase keys, unset optionals omitted."""
    variable = DependentVariableSettings(dependent_variable=DependentVariableLabel.ALTITUDE, body="Vehicle")
    assert variable.toTree() == {"type": "dependent", "dependentVariable": "altitude", "body": "Vehicle"}
