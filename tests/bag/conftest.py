"""
Shared fixtures for ParameterBag tests.
"""

import typing as _typing

import pytest as _pytest

import parambag.bag as bag


@_pytest.fixture
def nested_data() -> dict[str, _typing.Any]:
    """Plain nested dict used as the backing store in most tests."""
    return {
        "app": {"name": "demo", "debug": False},
        "db": {"primary": {"host": "localhost", "port": 5432}},
        "plugins": ["cache", "auth"],
        "timeout": 30,
    }


@_pytest.fixture
def nested_bag(nested_data: dict[str, _typing.Any]) -> bag.ParameterBag:
    """ParameterBag wrapping nested_data by reference."""
    return bag.ParameterBag(nested_data)
