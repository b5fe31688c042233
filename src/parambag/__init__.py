"""
parambag - Path-addressable containers for hierarchical key/value data.

Read and write deeply nested values with dotted paths ("db.primary.host")
or explicit key sequences, deep merge overrides, and serialize to JSON or
YAML.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml
_raw_version = _metadata.version("parambag")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

import parambag.bag as bag  # noqa: E402
import parambag.config as config  # noqa: E402
import parambag.errors as errors  # noqa: E402
from parambag.bag import ParameterBag, ValueKind, classify, create, resolve_path  # noqa: E402
from parambag.config import DEFAULT_OPTIONS, BagOptions  # noqa: E402
from parambag.errors import (  # noqa: E402
    InvalidPathError,
    NotContainerError,
    ParameterBagError,
    UnserializableError,
)

__all__ = [
    # Core
    "ParameterBag",
    "create",
    "resolve_path",
    "ValueKind",
    "classify",
    # Options
    "BagOptions",
    "DEFAULT_OPTIONS",
    # Errors
    "ParameterBagError",
    "InvalidPathError",
    "NotContainerError",
    "UnserializableError",
    "__version__",
    # Submodules
    "bag",
    "config",
    "errors",
]
