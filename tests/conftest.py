"""
Shared pytest fixtures for parambag tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import logging as _logging
import typing as _typing

import pytest as _pytest

import parambag.config as config

# =============================================================================
# Logging
# =============================================================================

# Parent logger of every parambag module logger
PACKAGE_LOGGER = "parambag"


@_pytest.fixture
def debug_logs(caplog: _pytest.LogCaptureFixture) -> _pytest.LogCaptureFixture:
    """
    Capture DEBUG records from parambag loggers.

    Usage:
        def test_something(debug_logs):
            ...
            assert "Merging" in debug_logs.text
    """
    caplog.set_level(_logging.DEBUG, logger=PACKAGE_LOGGER)
    return caplog


# =============================================================================
# Options
# =============================================================================


@_pytest.fixture
def slash_options() -> config.BagOptions:
    """Options using "/" as the path separator."""
    return config.BagOptions(separator="/")


@_pytest.fixture
def pretty_options() -> config.BagOptions:
    """Options producing indented, key-sorted JSON."""
    return config.BagOptions(json_indent=2, json_sort_keys=True)


@_pytest.fixture
def layered_defaults() -> dict[str, _typing.Any]:
    """Defaults document used by the override tests."""
    return {
        "model": {"name": "llama", "size": "7b", "context": 4096},
        "behavior": {"verbose": False, "max_tokens": 8192},
        "plugins": ["builtin"],
    }
