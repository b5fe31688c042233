"""
ParameterBag - path-addressable nested key/value container.

Example:
    >>> from parambag.bag import ParameterBag
    >>> bag = ParameterBag({"model": {"name": "llama", "size": "7b"}})
    >>> bag.merge({"model": {"size": "70b"}})
    ParameterBag({'model': {'name': 'llama', 'size': '70b'}})
    >>> bag.get("model.size")
    '70b'
"""

from parambag.bag._core import ParameterBag
from parambag.bag._paths import resolve_path
from parambag.bag._types import Path, PathLike, ValueKind, classify

create = ParameterBag.create

__all__ = [
    "ParameterBag",
    "Path",
    "PathLike",
    "ValueKind",
    "classify",
    "create",
    "resolve_path",
]
