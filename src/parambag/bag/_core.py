"""
ParameterBag: a path-addressable container for nested key/value data.

A ParameterBag holds one mutable mapping by reference and reads or writes
nested values through dotted string paths ("db.primary.host") or explicit
key sequences (["db", "primary", "host"]).

Read semantics:
- Mappings: returned as a new ParameterBag over the same mapping object,
  so writes through the wrapper land in the original structure
- Everything else: returned as-is

Thread safety: NOT thread-safe. Wrappers share their underlying mapping,
so concurrent writers need external synchronization.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import parambag.bag._merge as _merge
import parambag.bag._paths as _paths
import parambag.bag._serialize as _serialize
import parambag.bag._types as _types
import parambag.bag._views as _views
import parambag.config as config
import parambag.errors as errors

_logger = _logging.getLogger(__name__)


class ParameterBag(_abc.MutableMapping[str, _typing.Any]):
    """
    Wraps a nested mapping and provides path-based getters and setters.

    Example:
        >>> bag = ParameterBag({"db": {"host": "localhost"}})
        >>> bag.get("db.host")
        'localhost'
        >>> bag.set("db.port", 5432).get(["db", "port"])
        5432
        >>> db = bag.get("db")  # ParameterBag sharing bag's data
        >>> db.set("user", "admin")
        >>> bag.get("db.user")
        'admin'

    Note:
        **Reference semantics:** the mapping passed to the constructor is
        stored by reference, not copied. Mutating it from outside is visible
        through the bag, and vice versa. Use copy() for an independent bag.

        **None values:** get() treats a key holding None the same as a
        missing key and returns the default. has() inherits this, so it
        cannot tell "absent" from "present but None". Use contains() (or
        ``path in bag``) for a strict existence check.

        **Attribute access:** ``bag.name`` is ``bag.get("name")`` for any
        name that is not already an attribute of the class and does not
        start with an underscore.

        **Mapping protocol:** ``bag[key]``, ``key in bag`` and ``del bag[key]``
        use a string as a literal top-level key when one exists, and as a
        path otherwise, so every key from iteration can be looked up.
        get(), set(), contains() and remove() always parse paths.
    """

    __slots__ = ("_parameters", "_options")

    def __init__(
        self,
        parameters: _abc.MutableMapping[str, _typing.Any] | ParameterBag | None = None,
        options: config.BagOptions | None = None,
    ) -> None:
        """
        Create a bag.

        Args:
            parameters: The mapping to wrap. A ParameterBag shares its
                mapping. None creates a new empty dict.
            options: Separator and serialization options. Defaults to
                config.DEFAULT_OPTIONS.

        Raises:
            NotContainerError: If parameters is not a mutable mapping.
        """
        if parameters is None:
            parameters = {}
        elif isinstance(parameters, ParameterBag):
            parameters = parameters.all()
        elif not _types.is_mapping(parameters):
            raise errors.NotContainerError(
                (),
                message=f"Parameters must be a mapping, got {type(parameters).__name__}",
            )
        self._parameters: _abc.MutableMapping[str, _typing.Any] = parameters
        self._options = options if options is not None else config.DEFAULT_OPTIONS

    @classmethod
    def create(
        cls,
        parameters: _abc.MutableMapping[str, _typing.Any] | ParameterBag | None = None,
        options: config.BagOptions | None = None,
    ) -> _typing.Self:
        """Static factory, same arguments as the constructor."""
        return cls(parameters, options)

    @classmethod
    def from_json(
        cls,
        text: str | bytes,
        options: config.BagOptions | None = None,
    ) -> _typing.Self:
        """
        Parse a JSON object into a new bag.

        Raises:
            ParameterBagError: If the text is not valid JSON.
            NotContainerError: If the document root is not an object.
        """
        return cls._from_document(_serialize.from_json(text), options)

    @classmethod
    def from_yaml(
        cls,
        text: str | bytes,
        options: config.BagOptions | None = None,
    ) -> _typing.Self:
        """
        Parse a YAML mapping into a new bag. An empty document gives an empty bag.

        Raises:
            ParameterBagError: If the text is not valid YAML.
            NotContainerError: If the document root is not a mapping.
        """
        data = _serialize.from_yaml(text)
        if data is None:
            data = {}
        return cls._from_document(data, options)

    @classmethod
    def _from_document(
        cls,
        data: _typing.Any,
        options: config.BagOptions | None,
    ) -> _typing.Self:
        if not _types.is_mapping(data):
            raise errors.NotContainerError(
                (),
                message=f"Document root must be a mapping, got {type(data).__name__}",
            )
        return cls(data, options)

    @property
    def options(self) -> config.BagOptions:
        """Options shared with every wrapper this bag hands out."""
        return self._options

    # =========================================================================
    # Raw access
    # =========================================================================

    def all(self) -> _abc.MutableMapping[str, _typing.Any]:
        """
        Return the underlying mapping.

        This is the live data, not a copy: mutating it mutates the bag.
        """
        return self._parameters

    def get_as_dict(self) -> _abc.MutableMapping[str, _typing.Any]:
        """Alias of all()."""
        return self.all()

    def keys(self) -> _abc.KeysView[str]:  # type: ignore[override]
        """Live view of the top-level keys, in insertion order."""
        return self._parameters.keys()

    def items(self) -> _views.BagItemsView:  # type: ignore[override]
        """Top-level (key, value) pairs, nested mappings wrapped."""
        return _views.BagItemsView(self)

    def values(self) -> _views.BagValuesView:  # type: ignore[override]
        """Top-level values, nested mappings wrapped."""
        return _views.BagValuesView(self)

    def count(self) -> int:
        """Return the number of top-level entries."""
        return len(self._parameters)

    def is_empty(self) -> bool:
        """Check if the bag has no top-level entries."""
        return self.count() == 0

    # =========================================================================
    # Path-based access
    # =========================================================================

    def _resolve(self, path: _types.PathLike) -> _types.Path:
        return _paths.resolve_path(path, self._options.separator)

    def _wrap(self, value: _typing.Any) -> _typing.Any:
        """Wrap mappings in a new bag of the same type; pass others through."""
        if _types.is_mapping(value):
            return type(self)(value, self._options)
        return value

    def _lookup(self, keys: _types.Path) -> _typing.Any:
        """
        Return the raw value at a key sequence.

        Raises:
            KeyError: If any key is missing or a level is not a mapping.
        """
        current: _typing.Any = self._parameters
        for key in keys:
            if not _types.is_mapping(current) or key not in current:
                raise KeyError(key)
            current = current[key]
        return current

    def get(  # type: ignore[override]
        self,
        path: _types.PathLike,
        default: _typing.Any = None,
    ) -> _typing.Any:
        """
        Get a value by path, wrapping mappings so lookups can be chained.

        Args:
            path: Key path such as "foo", "foo.bar" or ["foo", "bar"]. An
                empty key sequence addresses the root.
            default: Returned (wrapped, if a mapping) when any key on the
                path is missing or holds None.

        Raises:
            InvalidPathError: If path is None or not a string/key sequence.
        """
        current: _typing.Any = self._parameters
        for key in self._resolve(path):
            if _types.is_mapping(current) and current.get(key) is not None:
                current = current[key]
            else:
                return self._wrap(default)
        return self._wrap(current)

    def has(self, path: _types.PathLike) -> bool:
        """
        Check if a path has a value.

        A key holding None reports False, the same as a missing key. See
        contains() for a check that tells the two apart.
        """
        return self.get(path) is not None

    def contains(self, path: _types.PathLike) -> bool:
        """Check if every key on the path exists, whatever its value."""
        try:
            self._lookup(self._resolve(path))
        except KeyError:
            return False
        return True

    def get_as_values(self, path: _types.PathLike) -> _typing.Any:
        """
        Get a path, falling back to an empty bag when it is missing.

        Convenient for chaining when the path may not exist:
            bag.get_as_values("plugins.cache").get("ttl", 60)
        """
        return self.get(path, {})

    # =========================================================================
    # Mutation
    # =========================================================================

    def set(self, path: _types.PathLike, value: _typing.Any) -> _typing.Self:
        """
        Set a value at a path, creating intermediate mappings as needed.

        Missing intermediate keys, and intermediate keys holding None, get a
        new empty dict. The walk is checked before anything is created, so a
        failed set leaves the structure unchanged.

        Args:
            path: Key path such as "foo", "foo.bar" or ["foo", "bar"].
            value: The value to store. A ParameterBag is stored as its
                underlying mapping.

        Returns:
            This bag, for chaining.

        Raises:
            InvalidPathError: If path is invalid or an empty key sequence.
            NotContainerError: If a key on the path holds a non-mapping value.
        """
        keys = self._resolve(path)
        if not keys:
            raise errors.InvalidPathError(path, "Can not set a value at an empty path")

        # Find the deepest existing mapping along the path
        current = self._parameters
        depth = 0
        for key in keys[:-1]:
            child = current.get(key)
            if child is None:
                break
            if not _types.is_mapping(child):
                _logger.debug("Rejected write to %r: %r holds a leaf", path, key)
                raise errors.NotContainerError(keys, key)
            current = child
            depth += 1

        for key in keys[depth:-1]:
            current[key] = {}
            current = current[key]

        current[keys[-1]] = _merge.unwrap(value)
        return self

    def remove(self, path: _types.PathLike) -> _typing.Self:
        """
        Delete the key at a path.

        Returns:
            This bag, for chaining.

        Raises:
            InvalidPathError: If path is invalid or an empty key sequence.
            KeyError: If the path does not exist.
        """
        keys = self._resolve(path)
        if not keys:
            raise errors.InvalidPathError(path, "Can not remove the root")
        parent = self._lookup(keys[:-1])
        if not _types.is_mapping(parent) or keys[-1] not in parent:
            raise KeyError(keys[-1])
        del parent[keys[-1]]
        return self

    def merge(
        self,
        parameters: _abc.Mapping[str, _typing.Any] | ParameterBag,
    ) -> _typing.Self:
        """
        Deep merge parameters into this bag.

        Nested mappings on both sides are merged key by key, in place.
        Any other pair (leaf/leaf, leaf/mapping, mapping/leaf) is replaced
        by the incoming value. Incoming values are copied, never aliased.

        Returns:
            This bag, for chaining.

        Raises:
            NotContainerError: If parameters is not a mapping.
        """
        incoming = _merge.unwrap(parameters)
        if not isinstance(incoming, _abc.Mapping):
            raise errors.NotContainerError(
                (),
                message=f"Can only merge a mapping, got {type(parameters).__name__}",
            )
        _logger.debug("Merging %d top-level keys", len(incoming))
        _merge.deep_merge_into(self._parameters, incoming)
        return self

    def copy(self) -> _typing.Self:
        """
        Return a new bag over a copy of the data, with the same options.

        Mappings and lists are copied at every depth; other leaves are shared.
        """
        return type(self)(_merge.detached_copy(self._parameters), self._options)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_json(self, **overrides: _typing.Any) -> str:
        """
        Serialize the whole structure as JSON text.

        Args:
            **overrides: BagOptions fields to change for this call only,
                such as json_indent=2.

        Raises:
            UnserializableError: If any value cannot be represented in JSON.
            pydantic.ValidationError: If an override is unknown or invalid.
        """
        return _serialize.to_json(self._parameters, self._options.with_overrides(**overrides))

    def to_yaml(self, **overrides: _typing.Any) -> str:
        """
        Serialize the whole structure as YAML text, keeping key order.

        Raises:
            UnserializableError: If any value cannot be represented in YAML.
            pydantic.ValidationError: If an override is unknown or invalid.
        """
        return _serialize.to_yaml(self._parameters, self._options.with_overrides(**overrides))

    # =========================================================================
    # Mapping protocol
    #
    # A string naming an existing top-level key is used as that key, so
    # every key yielded by iteration can be read, tested and deleted even
    # when it contains the separator. Anything else is parsed as a path.
    # =========================================================================

    def _is_top_level_key(self, path: object) -> bool:
        return isinstance(path, str) and path in self._parameters

    def __getitem__(self, path: _types.PathLike) -> _typing.Any:
        """
        Strict path lookup.

        Unlike get(), a key holding None is returned rather than treated as
        missing.

        Raises:
            KeyError: If the path does not exist.
            InvalidPathError: If path is invalid.
        """
        if self._is_top_level_key(path):
            return self._wrap(self._parameters[path])  # type: ignore[index]
        return self._wrap(self._lookup(self._resolve(path)))

    def __setitem__(self, path: _types.PathLike, value: _typing.Any) -> None:
        if self._is_top_level_key(path):
            self._parameters[path] = _merge.unwrap(value)  # type: ignore[index]
        else:
            self.set(path, value)

    def __delitem__(self, path: _types.PathLike) -> None:
        if self._is_top_level_key(path):
            del self._parameters[path]  # type: ignore[arg-type]
        else:
            self.remove(path)

    def __contains__(self, path: object) -> bool:
        return self._is_top_level_key(path) or self.contains(path)  # type: ignore[arg-type]

    def clear(self) -> None:
        """Remove every top-level entry from the underlying mapping."""
        self._parameters.clear()

    def popitem(self) -> tuple[str, _typing.Any]:
        """
        Remove and return the first top-level (key, value) pair.

        Raises:
            KeyError: If the bag is empty.
        """
        if not self._parameters:
            raise KeyError("popitem(): bag is empty")
        key = next(iter(self._parameters))
        return key, self._wrap(self._parameters.pop(key))

    def __iter__(self) -> _typing.Iterator[str]:
        """Iterate over top-level keys in insertion order."""
        return iter(self._parameters)

    def __len__(self) -> int:
        return self.count()

    def __getattr__(self, name: str) -> _typing.Any:
        """
        Dynamic attribute lookup: ``bag.name`` is ``bag.get("name")``.

        Only called for names not found on the class. Private and dunder
        names raise AttributeError so copy, pickle and friends see a
        normal object.
        """
        if name.startswith("_"):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self.get(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with the same content."""
        if isinstance(other, _abc.Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        """Not hashable."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")
