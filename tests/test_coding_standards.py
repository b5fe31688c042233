"""
Tests that enforce coding standards.

These tests verify that the codebase follows our import and logging
conventions.
"""

import pathlib as _pathlib
import re as _re

import pytest as _pytest

# Directories to check
SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "parambag"
TESTS_DIR = _pathlib.Path(__file__).parent.parent / "tests"

# Module-level logger assignment every logging module must use
LOGGER_PATTERN = _re.compile(r"^_logger = _logging\.getLogger\(__name__\)$", _re.MULTILINE)


def _get_python_files(directory: _pathlib.Path) -> list[_pathlib.Path]:
    """Get all Python files in a directory, recursively."""
    return sorted(directory.rglob("*.py"))


def _extract_from_imports(content: str) -> list[tuple[int, str]]:
    """
    Extract 'from X import Y' statements from file content.

    Returns list of (line_number, line_content) tuples.
    Excludes:
    - 'from __future__ import' (allowed)
    - Lines inside TYPE_CHECKING blocks (allowed)
    """
    imports: list[tuple[int, str]] = []
    in_type_checking = False

    for i, line in enumerate(content.split("\n"), start=1):
        stripped = line.strip()

        if "if _typing.TYPE_CHECKING:" in line:
            in_type_checking = True
            continue

        # Block ends at the next non-indented statement
        if in_type_checking and stripped and not line[0].isspace() and not stripped.startswith("#"):
            in_type_checking = False

        if in_type_checking:
            continue

        if stripped.startswith("from ") and " import " in stripped:
            if "from __future__ import" in stripped:
                continue
            imports.append((i, stripped))

    return imports


def _import_violations(paths: list[_pathlib.Path]) -> list[str]:
    """Collect forbidden imports, skipping __init__.py re-exports."""
    violations: list[str] = []
    for path in paths:
        if path.name == "__init__.py":
            continue
        for line_num, line in _extract_from_imports(path.read_text()):
            violations.append(f"{path}:{line_num}: {line}")
    return violations


class TestImportStyle:
    """Tests for import style compliance."""

    def test_src_no_from_imports(self) -> None:
        """Source files should not use 'from X import Y' pattern."""
        violations = _import_violations(_get_python_files(SRC_DIR))
        if violations:
            _pytest.fail(
                "Found forbidden 'from X import Y' imports:\n"
                + "\n".join(f"  {v}" for v in violations)
                + "\n\nUse 'import X as _x' (external) or 'import X as x' (internal) instead."
            )

    def test_tests_no_from_imports(self) -> None:
        """Test files should not use 'from X import Y' pattern."""
        paths = [
            path
            for path in _get_python_files(TESTS_DIR)
            if path.name != "test_coding_standards.py"
        ]
        violations = _import_violations(paths)
        if violations:
            _pytest.fail(
                "Found forbidden 'from X import Y' imports:\n"
                + "\n".join(f"  {v}" for v in violations)
            )


class TestLoggingStyle:
    """Modules that log use one module-level logger named after the module."""

    def test_logging_modules_define_logger(self) -> None:
        missing: list[str] = []
        for path in _get_python_files(SRC_DIR):
            content = path.read_text()
            if "import logging as _logging" in content and not LOGGER_PATTERN.search(content):
                missing.append(str(path))
        assert not missing, f"Modules import logging without a _logger: {missing}"

    def test_no_print_calls(self) -> None:
        """Library code reports through logging, never print()."""
        offenders = [
            str(path)
            for path in _get_python_files(SRC_DIR)
            if _re.search(r"^\s*print\(", path.read_text(), _re.MULTILINE)
        ]
        assert not offenders, f"print() found in: {offenders}"


class TestImportExtraction:
    """Tests for the import extraction logic itself."""

    def test_detects_from_import(self) -> None:
        imports = _extract_from_imports("from pathlib import Path")
        assert imports == [(1, "from pathlib import Path")]

    def test_allows_future_imports(self) -> None:
        assert _extract_from_imports("from __future__ import annotations") == []

    def test_ignores_type_checking_block(self) -> None:
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from some_module import SomeType

def foo():
    pass
"""
        assert _extract_from_imports(content) == []

    def test_detects_import_after_type_checking(self) -> None:
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from allowed import Type

from forbidden import Other
"""
        imports = _extract_from_imports(content)
        assert len(imports) == 1
        assert "from forbidden import Other" in imports[0][1]
