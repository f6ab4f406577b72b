"""Resolve human-authored configuration trees into multi-body propagation settings.

The top-level entry points are :func:`.decodePropagatorSettings`, which fills in missing initial
states & termination conditions while building :class:`.MultiTypePropagatorSettings`, and
:func:`.encodePropagatorSettings`, which writes such settings back into a :class:`.ConfigTree`.
"""

from __future__ import annotations

__version__ = "1.0.0"

# Local Imports
from .resolution import decodePropagatorSettings, encodePropagatorSettings
from .tree import ConfigTree, KeyPath

__all__ = ["ConfigTree", "KeyPath", "decodePropagatorSettings", "encodePropagatorSettings"]
