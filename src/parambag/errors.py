"""
Exceptions raised by parambag.

All errors derive from ParameterBagError so callers can catch the whole
family with one clause. The concrete classes also derive from the builtin
exception a plain dict operation would raise in the same situation.
"""

from __future__ import annotations

import typing as _typing


def _format_path(path: _typing.Any) -> str:
    """Render a path for error messages."""
    if isinstance(path, (list, tuple)):
        return ".".join(str(key) for key in path) if path else "<root>"
    return repr(path)


class ParameterBagError(Exception):
    """Base class for all parambag errors."""


class InvalidPathError(ParameterBagError, TypeError):
    """A path is None, not a string or key sequence, or unusable for the operation."""

    def __init__(self, path: _typing.Any, message: str | None = None) -> None:
        self.path = path
        if message is None:
            message = (
                "Parameter paths must be a string or a sequence of strings, "
                f"got {type(path).__name__}"
            )
        super().__init__(message)


class NotContainerError(ParameterBagError, TypeError):
    """A write or merge targeted a value that is not a mapping."""

    def __init__(
        self,
        path: _typing.Any,
        key: str | None = None,
        message: str | None = None,
    ) -> None:
        self.path = path
        self.key = key
        if message is None:
            message = (
                f"Can not set value at path {_format_path(path)} "
                f"because {key!r} is not a mapping"
            )
        super().__init__(message)


class UnserializableError(ParameterBagError, ValueError):
    """A value in the structure cannot be represented in the target format."""

    def __init__(self, path: tuple[str, ...], message: str) -> None:
        self.path = path
        super().__init__(f"Cannot serialize value at {_format_path(path)}: {message}")
