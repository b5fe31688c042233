"""
Deep merge for ParameterBag.

The merge runs in place against the live target mapping: nested mappings
present on both sides are merged key by key into the existing mapping
object, so wrappers already handed out observe the result. Every other
combination is replaced by the incoming value.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import parambag.bag._types as _types


def unwrap(value: _typing.Any) -> _typing.Any:
    """
    Return the underlying mapping of a ParameterBag, or the value itself.

    The core module is imported lazily since it imports this one.
    """
    import parambag.bag._core as _core

    if isinstance(value, _core.ParameterBag):
        return value.all()
    return value


def detached_copy(value: _typing.Any) -> _typing.Any:
    """
    Copy the structure of a value, unwrapping any ParameterBag inside it.

    Mappings (read-only ones included) become new dicts and lists become
    new lists, so the result never aliases the caller's containers. Every
    other leaf is stored by reference, the same way set() stores values.
    """
    value = unwrap(value)
    if isinstance(value, _abc.Mapping):
        return {key: detached_copy(item) for key, item in value.items()}
    if isinstance(value, list):
        return [detached_copy(item) for item in value]
    return value


def deep_merge_into(
    target: _abc.MutableMapping[str, _typing.Any],
    incoming: _abc.Mapping[str, _typing.Any],
) -> _abc.MutableMapping[str, _typing.Any]:
    """
    Deep merge incoming into target, with incoming taking priority.

    Incoming mappings need not be mutable; a read-only mapping merges the
    same way a dict does, at any depth.

    Args:
        target: The mapping to modify in place.
        incoming: The mapping to merge in. Never modified or aliased.

    Returns:
        The target mapping.

    Example:
        >>> data = {"a": {"x": 1, "y": 2}}
        >>> deep_merge_into(data, {"a": {"y": 3, "z": 4}})
        {'a': {'x': 1, 'y': 3, 'z': 4}}
    """
    for key, value in incoming.items():
        value = unwrap(value)
        existing = target.get(key)
        if _types.is_mapping(existing) and isinstance(value, _abc.Mapping):
            deep_merge_into(existing, value)
        else:
            # Replace (scalar, sequence, or kind mismatch)
            target[key] = detached_copy(value)
    return target
