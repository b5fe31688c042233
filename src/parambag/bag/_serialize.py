"""
JSON and YAML text encoding for ParameterBag.

Encoding is all-or-nothing: the structure is walked and checked before the
encoder runs, so a bad leaf raises UnserializableError naming its path
instead of producing partial output.
"""

from __future__ import annotations

import collections.abc as _abc
import json as _json
import logging as _logging
import math as _math
import typing as _typing

import yaml as _yaml

import parambag.bag._types as _types
import parambag.config as config
import parambag.errors as errors

_logger = _logging.getLogger(__name__)

# Key types json.dumps converts to strings on its own
_JSON_KEY_TYPES = (str, int, float, bool, type(None))


def check_serializable(
    value: _typing.Any,
    *,
    allow_nan: bool,
    path: _types.Path = (),
    seen: set[int] | None = None,
) -> None:
    """
    Verify that every value in a structure has a JSON/YAML representation.

    Args:
        value: The structure to check.
        allow_nan: Whether NaN and Infinity floats are acceptable.
        path: Path of value from the root, used in error messages.
        seen: Object ids of the containers on the current branch.

    Raises:
        UnserializableError: On the first offending value.
    """
    if seen is None:
        seen = set()

    kind = _types.classify(value)

    if kind is _types.ValueKind.FLOAT and not allow_nan and not _math.isfinite(value):
        raise errors.UnserializableError(path, f"out of range float {value!r}")
    if kind is _types.ValueKind.BLOB:
        raise errors.UnserializableError(path, "binary data has no text representation")
    if kind is _types.ValueKind.OPAQUE:
        raise errors.UnserializableError(
            path, f"object of type {type(value).__name__} is not serializable"
        )
    if kind.is_leaf and kind is not _types.ValueKind.SEQUENCE:
        return

    obj_id = id(value)
    if obj_id in seen:
        raise errors.UnserializableError(path, "circular reference detected")
    seen.add(obj_id)

    if kind is _types.ValueKind.MAPPING:
        for key, item in value.items():
            if not isinstance(key, _JSON_KEY_TYPES):
                raise errors.UnserializableError(
                    path, f"key {key!r} of type {type(key).__name__} is not serializable"
                )
            check_serializable(item, allow_nan=allow_nan, path=path + (str(key),), seen=seen)
    else:
        for index, item in enumerate(value):
            check_serializable(item, allow_nan=allow_nan, path=path + (str(index),), seen=seen)

    seen.discard(obj_id)


def _plain(value: _typing.Any) -> _typing.Any:
    """Convert mappings to dicts and tuples to lists for the encoders."""
    if isinstance(value, _abc.Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def to_json(
    data: _abc.Mapping[str, _typing.Any],
    options: config.BagOptions,
) -> str:
    """
    Encode a mapping as JSON text.

    Raises:
        UnserializableError: If any value cannot be represented in JSON.
    """
    try:
        check_serializable(data, allow_nan=options.json_allow_nan)
    except errors.UnserializableError as e:
        _logger.debug("JSON encoding rejected: %s", e)
        raise
    try:
        return _json.dumps(_plain(data), **options.json_kwargs())
    except (TypeError, ValueError) as e:
        raise errors.UnserializableError((), str(e)) from e


def to_yaml(
    data: _abc.Mapping[str, _typing.Any],
    options: config.BagOptions,
) -> str:
    """
    Encode a mapping as YAML text, preserving key order.

    Raises:
        UnserializableError: If any value cannot be represented in YAML.
    """
    try:
        # NaN and Infinity have YAML spellings (.nan, .inf)
        check_serializable(data, allow_nan=True)
    except errors.UnserializableError as e:
        _logger.debug("YAML encoding rejected: %s", e)
        raise
    try:
        return _typing.cast(str, _yaml.safe_dump(_plain(data), **options.yaml_kwargs()))
    except _yaml.representer.RepresenterError as e:
        raise errors.UnserializableError((), str(e)) from e


def from_json(text: str | bytes) -> _typing.Any:
    """
    Parse JSON text.

    Raises:
        ParameterBagError: If the text is not valid JSON.
    """
    try:
        return _json.loads(text)
    except ValueError as e:
        raise errors.ParameterBagError(f"Invalid JSON document: {e}") from e


def from_yaml(text: str | bytes) -> _typing.Any:
    """
    Parse a single YAML document with the safe loader.

    Raises:
        ParameterBagError: If the text is not valid YAML.
    """
    try:
        return _yaml.safe_load(text)
    except _yaml.YAMLError as e:
        raise errors.ParameterBagError(f"Invalid YAML document: {e}") from e
