"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Standard Library Imports
import json
from json import JSONEncoder
from typing import TYPE_CHECKING

# Third Party Imports
import numpy as np

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any


class NumpyArrayEncoder(JSONEncoder):
    """Handles serialization of numpy arrays and scalars."""

    def default(self, obj):
        """Serialize a numpy object into its plain Python counterpart.

        Args:
            obj (``Any``): object that the default encoder could not serialize

        Returns:
            ``list | float | int``: serializable representation of `obj`
        """
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.generic):
            return obj.item()
        return JSONEncoder.default(self, obj)


def toPlainData(obj: Any) -> Any:
    """Recursively copy `obj`, converting numpy containers into plain lists & scalars.

    Args:
        obj (``Any``): nested ``dict``/``list``/scalar data, possibly containing numpy values

    Returns:
        ``Any``: deep copy of `obj` made only of JSON-compatible Python types
    """
    if isinstance(obj, dict):
        return {key: toPlainData(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [toPlainData(value) for value in obj]
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    return obj


def dumpJSON(obj: Any, indent: int | None = None) -> str:
    """Serialize `obj` to a JSON string, converting numpy values on the way."""
    return json.dumps(obj, cls=NumpyArrayEncoder, indent=indent)

