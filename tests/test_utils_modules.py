"""Tests for utility modules (_utils package)."""

import os

import pytest

from tmpsweep._utils import (
    contains_path_separator,
    is_within_directory,
    split_path_components,
)


class TestFileUtils:
    """Tests for file_utils module."""

    @pytest.mark.parametrize("value", ["a/b", "/a", "a/"])
    def test_contains_path_separator(self, value):
        """Test detection of forward slashes."""
        assert contains_path_separator(value) is True

    def test_contains_os_separator(self):
        """Test detection of the platform separator."""
        assert contains_path_separator(f"a{os.sep}b") is True

    @pytest.mark.parametrize("value", ["plain", "with space", "dots.and-dashes", ""])
    def test_no_path_separator(self, value):
        """Test values without separators."""
        assert contains_path_separator(value) is False

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("a/b/c", ["a", "b", "c"]),
            ("/leading", ["leading"]),
            ("trailing/", ["trailing"]),
            ("a//b", ["a", "b"]),
            ("a/   /b", ["a", "b"]),
            ("keep  inner/ space ", ["keep  inner", " space "]),
            ("", []),
        ],
    )
    def test_split_path_components(self, value, expected):
        """Test splitting and whitespace-only component removal."""
        assert split_path_components(value) == expected

    def test_is_within_directory(self, tmp_path):
        """Test containment checks."""
        root = str(tmp_path)

        assert is_within_directory(root, root) is True
        assert is_within_directory(root, str(tmp_path / "a" / "b")) is True
        assert is_within_directory(root, str(tmp_path.parent)) is False
        assert is_within_directory(root, root + "-sibling") is False
