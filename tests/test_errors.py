"""Tests for the exception hierarchy."""

import pytest as _pytest

import parambag
import parambag.errors as errors


class TestHierarchy:
    """All errors share a base class and a matching builtin."""

    @_pytest.mark.parametrize(
        ("error_cls", "builtin"),
        [
            (errors.InvalidPathError, TypeError),
            (errors.NotContainerError, TypeError),
            (errors.UnserializableError, ValueError),
        ],
    )
    def test_bases(self, error_cls: type[Exception], builtin: type[Exception]) -> None:
        assert issubclass(error_cls, errors.ParameterBagError)
        assert issubclass(error_cls, builtin)

    def test_reexported(self) -> None:
        assert parambag.InvalidPathError is errors.InvalidPathError
        assert parambag.ParameterBagError is errors.ParameterBagError


class TestMessages:
    """Messages name the offending path."""

    def test_invalid_path_default_message(self) -> None:
        error = errors.InvalidPathError(None)
        assert error.path is None
        assert "NoneType" in str(error)

    def test_not_container_message(self) -> None:
        error = errors.NotContainerError(("a", "b"), "a")
        assert str(error) == "Can not set value at path a.b because 'a' is not a mapping"

    def test_not_container_custom_message(self) -> None:
        error = errors.NotContainerError((), message="nope")
        assert str(error) == "nope"
        assert error.key is None

    def test_unserializable_message(self) -> None:
        error = errors.UnserializableError(("a", "0"), "bad value")
        assert str(error) == "Cannot serialize value at a.0: bad value"

    def test_unserializable_root(self) -> None:
        assert "<root>" in str(errors.UnserializableError((), "bad"))
