"""Defines the key-addressable configuration tree consumed & produced by ``proptree``.

A :class:`.ConfigTree` wraps already-parsed, nested ``dict``/``list``/scalar data (e.g. the
output of ``json.load``) and provides path-based access through :class:`.KeyPath` objects:

.. code-block:: python

    tree = ConfigTree({"bodies": {"Earth": {"mass": 5.97e24}}})
    tree.get(KeyPath("bodies") / "Earth" / "mass")
    tree.get("options.printInterval", 60.0)

A key holding ``None`` (JSON ``null``) is treated as undefined.
"""

from __future__ import annotations

# Standard Library Imports
import json
from copy import deepcopy
from typing import TYPE_CHECKING, Union

# Local Imports
from .common.exceptions import KeyNotFoundError
from .common.logger import proptreeLogError
from .common.utilities import dumpJSON, toPlainData

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterator
    from typing import Any

    # Third Party Imports
    from typing_extensions import TypeAlias


_UNDEFINED = object()


class KeyPath:
    """Immutable sequence of object keys & array indices addressing a node of a :class:`.ConfigTree`."""

    SEPARATOR: str = "."

    def __init__(self, *keys: str | int | KeyPath) -> None:
        """Build a key path from `keys`.

        Args:
            keys (``str | int | KeyPath``): path components. String components are literal keys,
                even if they contain :attr:`.SEPARATOR`, and nested key paths are flattened.
        """
        parts: list[str | int] = []
        for key in keys:
            if isinstance(key, KeyPath):
                parts.extend(key.keys)
            elif isinstance(key, (str, int)):
                parts.append(key)
            else:
                raise TypeError(f"Invalid key path component: {key!r}")
        self._keys = tuple(parts)

    @classmethod
    def parse(cls, path: PathLike) -> KeyPath:
        """Return `path` as a :class:`.KeyPath`, splitting a ``str`` path on :attr:`.SEPARATOR`.

        Empty components of a dotted string are ignored. Key paths & array indices are used as-is.
        """
        if isinstance(path, str):
            return cls(*(part for part in path.split(cls.SEPARATOR) if part))
        return cls(path)

    @property
    def keys(self) -> tuple[str | int, ...]:
        """``tuple``: components of this key path."""
        return self._keys

    @property
    def parent(self) -> KeyPath:
        """:class:`.KeyPath`: key path without its last component."""
        return KeyPath(*self._keys[:-1])

    def __truediv__(self, key: str | int | KeyPath) -> KeyPath:
        """:class:`.KeyPath`: new key path with `key` appended."""
        return KeyPath(self, key)

    def __iter__(self) -> Iterator[str | int]:
        """Iterate over the components of this key path."""
        return iter(self._keys)

    def __len__(self) -> int:
        """``int``: number of components."""
        return len(self._keys)

    def __eq__(self, other: object) -> bool:
        """``bool``: whether `other` addresses the same node."""
        if isinstance(other, str):
            other = KeyPath.parse(other)
        if not isinstance(other, KeyPath):
            return NotImplemented
        return self._keys == other.keys

    def __hash__(self) -> int:
        """``int``: hash of the key components."""
        return hash(self._keys)

    def __str__(self) -> str:
        """``str``: dotted representation, array indices written as ``[i]``."""
        text = ""
        for key in self._keys:
            if isinstance(key, int):
                text += f"[{key}]"
            else:
                text += f"{self.SEPARATOR}{key}" if text else key
        return text

    def __repr__(self) -> str:
        """``str``: debugging representation."""
        return f"KeyPath({str(self)!r})"


PathLike: TypeAlias = Union[KeyPath, str, int]


class ConfigTree:
    """Mutable, key-addressable tree of already-parsed configuration data."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Wrap `data` without copying it.

        Args:
            data (``dict``, optional): root object of the tree. Defaults to an empty object.
        """
        self._data = {} if data is None else data
        if not isinstance(self._data, dict):
            raise TypeError(f"Configuration tree root must be an object, not {type(self._data)}")

    @classmethod
    def fromJSON(cls, json_string: str) -> ConfigTree:
        """Build a tree from a JSON string."""
        return cls(json.loads(json_string))

    @property
    def data(self) -> dict[str, Any]:
        """``dict``: root object of the tree, by reference."""
        return self._data

    def _find(self, path: PathLike) -> Any:
        """Return the node at `path`, or the module-level undefined marker."""
        node: Any = self._data
        for key in KeyPath.parse(path):
            if isinstance(key, int):
                if not isinstance(node, list) or not -len(node) <= key < len(node):
                    return _UNDEFINED
            elif not isinstance(node, dict) or key not in node:
                return _UNDEFINED
            node = node[key]
            if node is None:
                return _UNDEFINED
        return node

    def hasKey(self, path: PathLike) -> bool:
        """``bool``: whether a non-null value is defined at `path`."""
        return self._find(path) is not _UNDEFINED

    def get(self, path: PathLike, default: Any = _UNDEFINED) -> Any:
        """Return the value at `path`.

        Args:
            path (``KeyPath | str``): key path of the requested value
            default (``Any``, optional): value returned when `path` is undefined. If not given, a
                missing value is an error.

        Raises:
            :class:`.KeyNotFoundError`: if `path` is undefined and no `default` was given

        Returns:
            ``Any``: stored value, by reference
        """
        value = self._find(path)
        if value is not _UNDEFINED:
            return value
        if default is not _UNDEFINED:
            return default

        err = KeyNotFoundError(KeyPath.parse(path))
        proptreeLogError(str(err))
        raise err

    def set(self, path: PathLike, value: Any) -> None:
        """Store `value` at `path`, creating intermediate objects as required.

        Raises:
            ``TypeError``: if an intermediate node is a scalar, or an array is indexed by name
            ``IndexError``: if an array index is out of range
        """
        key_path = KeyPath.parse(path)
        if not key_path.keys:
            raise ValueError("Cannot replace the root of a configuration tree")

        node: Any = self._data
        for depth, key in enumerate(key_path.keys[:-1]):
            child_key = key_path.keys[depth + 1]
            if isinstance(node, dict):
                if node.get(key) is None:
                    node[key] = [] if isinstance(child_key, int) else {}
                node = node[key]
            elif isinstance(node, list) and isinstance(key, int):
                node = node[key]
            else:
                raise TypeError(f"Cannot set {str(key_path)!r}: {str(KeyPath(*key_path.keys[:depth]))!r} is a leaf")

        last = key_path.keys[-1]
        if isinstance(node, list) and isinstance(last, int):
            node[last] = value
        elif isinstance(node, dict) and isinstance(last, str):
            node[last] = value
        else:
            raise TypeError(f"Cannot set {str(key_path)!r} on a {type(node).__name__}")

    def delete(self, path: PathLike) -> None:
        """Remove the value at `path`, if defined."""
        key_path = KeyPath.parse(path)
        if not self.hasKey(key_path):
            return
        parent = self._data if len(key_path) == 1 else self._find(key_path.parent)
        del parent[key_path.keys[-1]]

    def subtree(self, path: PathLike) -> ConfigTree:
        """Return the object at `path` wrapped as a :class:`.ConfigTree`, sharing its data."""
        return ConfigTree(self.get(path))

    def toDict(self) -> dict[str, Any]:
        """``dict``: deep copy of the tree made only of JSON-compatible Python types."""
        return toPlainData(deepcopy(self._data))

    def toJSON(self, indent: int | None = None) -> str:
        """``str``: JSON representation of the tree."""
        return dumpJSON(self._data, indent=indent)

    def __contains__(self, path: PathLike) -> bool:
        """``bool``: alias for :meth:`.hasKey`."""
        return self.hasKey(path)

    def __eq__(self, other: object) -> bool:
        """``bool``: whether `other` holds equal data."""
        if not isinstance(other, ConfigTree):
            return NotImplemented
        return self.toDict() == other.toDict()

    def __repr__(self) -> str:
        """``str``: debugging representation."""
        return f"ConfigTree({self._data!r})"
