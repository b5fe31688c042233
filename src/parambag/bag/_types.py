"""
Type aliases and value classification for ParameterBag.

Every stored value falls into exactly one ValueKind. Wrapping, merging and
serialization dispatch on the kind instead of scattering isinstance checks.
"""

from __future__ import annotations

import collections.abc as _abc
import enum as _enum
import typing as _typing

# Normalized path: ("config", "model", "name") addresses config.model.name
Path: _typing.TypeAlias = tuple[str, ...]

# Surface forms accepted wherever a path is expected
PathLike: _typing.TypeAlias = str | list[str] | tuple[str, ...]


class ValueKind(_enum.Enum):
    """Closed set of value kinds a ParameterBag can hold."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BLOB = "blob"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OPAQUE = "opaque"

    @property
    def is_leaf(self) -> bool:
        """Everything except MAPPING is a leaf."""
        return self is not ValueKind.MAPPING


def classify(value: _typing.Any) -> ValueKind:
    """
    Return the kind of a value.

    bool is checked before int since bool subclasses int. Only mutable
    mappings count as MAPPING: a read-only view cannot be written through,
    so it is treated as an opaque leaf.

    Example:
        >>> classify({"a": 1})
        <ValueKind.MAPPING: 'mapping'>
        >>> classify([1, 2])
        <ValueKind.SEQUENCE: 'sequence'>
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.BLOB
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, _abc.MutableMapping):
        return ValueKind.MAPPING
    return ValueKind.OPAQUE


def is_mapping(value: _typing.Any) -> bool:
    """Check if a value is a nested mapping (eligible for wrapping)."""
    return classify(value) is ValueKind.MAPPING
