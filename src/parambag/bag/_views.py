"""
Item and value views for ParameterBag.

The stock Mapping views look values up through __getitem__, which treats
its argument as a path. These views read the top-level mapping directly so
keys containing the separator are taken literally, and apply the wrapping
policy to every value they yield.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

if _typing.TYPE_CHECKING:
    import parambag.bag._core as _core


class BagItemsView(_abc.ItemsView):  # type: ignore[type-arg]
    """(key, value) pairs of a ParameterBag's top level, values wrapped."""

    __slots__ = ()

    _mapping: _core.ParameterBag

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        key, value = item
        raw = self._mapping.all()
        if key not in raw:
            return False
        current = self._mapping._wrap(raw[key])
        return current is value or bool(current == value)

    def __iter__(self) -> _typing.Iterator[tuple[str, _typing.Any]]:
        raw = self._mapping.all()
        for key in raw:
            yield key, self._mapping._wrap(raw[key])


class BagValuesView(_abc.ValuesView):  # type: ignore[type-arg]
    """Values of a ParameterBag's top level, wrapped."""

    __slots__ = ()

    _mapping: _core.ParameterBag

    def __contains__(self, value: object) -> bool:
        return any(current is value or current == value for current in self)

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        raw = self._mapping.all()
        for key in raw:
            yield self._mapping._wrap(raw[key])
