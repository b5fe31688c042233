"""
Path resolution for ParameterBag.

A path is either a separator-joined string ("a.b.c") or an explicit
sequence of keys (["a", "b", "c"]). Both normalize to a tuple of keys.
"""

from __future__ import annotations

import typing as _typing

import parambag.bag._types as _types
import parambag.errors as errors


def validate_path(path: _typing.Any) -> None:
    """
    Reject paths that are None or arbitrary objects.

    Raises:
        InvalidPathError: If path is not a str, list or tuple, or if a
            sequence path contains a non-string key.
    """
    if isinstance(path, str):
        return
    if isinstance(path, (list, tuple)):
        for key in path:
            if not isinstance(key, str):
                raise errors.InvalidPathError(
                    path,
                    f"Path keys must be strings, got {type(key).__name__}",
                )
        return
    raise errors.InvalidPathError(path)


def resolve_path(path: _types.PathLike, separator: str = ".") -> _types.Path:
    """
    Normalize a path into a tuple of keys.

    A key sequence keeps its keys and their order but always comes back
    as a new tuple, even when a list was passed in. Empty segments in
    string paths are kept as literal "" keys, so "a..b" resolves to
    ("a", "", "b").

    Args:
        path: String path or sequence of keys.
        separator: Separator between keys in string paths.

    Returns:
        Tuple of keys, possibly empty for an empty key sequence.

    Raises:
        InvalidPathError: See validate_path().

    Example:
        >>> resolve_path("foo.bar")
        ('foo', 'bar')
        >>> resolve_path(["foo.bar", "baz"])
        ('foo.bar', 'baz')
    """
    validate_path(path)
    if isinstance(path, str):
        return tuple(path.split(separator))
    return tuple(path)
