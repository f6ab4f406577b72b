"""Submodule defining the base class shared by every settings model."""

from __future__ import annotations

# Standard Library Imports
from typing import Any

# Third Party Imports
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SettingsModel(BaseModel):
    """Base model mapping ``snake_case`` attributes onto the ``camelCase`` keys of a configuration tree."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def toTree(self) -> dict[str, Any]:
        """``dict``: JSON-compatible representation, keyed like the configuration tree, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
