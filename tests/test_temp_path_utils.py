"""Tests for tmp root lookup and base directory resolution."""

import os

import pytest

from tmpsweep import InvalidPathError
from tmpsweep.temp_path_utils import normalized_os_tmpdir, resolve_base_dir


class TestNormalizedOsTmpdir:
    """Tests for normalized_os_tmpdir."""

    def test_follows_tempfile(self, os_tmpdir):
        """Test that the OS tmp dir comes from the tempfile module."""
        assert normalized_os_tmpdir() == str(os_tmpdir)

    def test_resolves_symlinks(self, tmp_path, monkeypatch):
        """Test that a symlinked tmp dir is canonicalized."""
        import tempfile

        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)
        monkeypatch.setattr(tempfile, "tempdir", str(link))

        assert normalized_os_tmpdir() == str(real)


class TestResolveBaseDir:
    """Tests for resolve_base_dir."""

    def test_defaults_to_os_tmpdir(self, os_tmpdir):
        """Test that no options resolve to the OS tmp dir."""
        assert resolve_base_dir() == str(os_tmpdir)

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_dir_is_ignored(self, os_tmpdir, value):
        """Test that whitespace-only dir values are treated as unset."""
        assert resolve_base_dir(dir=value) == str(os_tmpdir)

    def test_dir_is_joined(self, os_tmpdir):
        """Test that dir is appended to the tmp root."""
        assert resolve_base_dir(dir="custom-dir") == str(os_tmpdir / "custom-dir")

    def test_surrounding_whitespace_is_trimmed(self, os_tmpdir):
        """Test that leading separators and whitespace are dropped."""
        assert resolve_base_dir(dir="   /hidden-no") == str(os_tmpdir / "hidden-no")

    def test_inner_whitespace_is_preserved(self, os_tmpdir):
        """Test that whitespace inside a component is kept."""
        assert resolve_base_dir(dir="custom-dir/.hidden  yes") == str(os_tmpdir / "custom-dir" / ".hidden  yes")

    def test_whitespace_only_components_are_dropped(self, os_tmpdir):
        """Test that blank path components disappear."""
        assert resolve_base_dir(dir="a/   /b") == str(os_tmpdir / "a" / "b")

    def test_dir_escaping_root_is_rejected(self, os_tmpdir):
        """Test that dir cannot leave the tmp root."""
        with pytest.raises(InvalidPathError):
            resolve_base_dir(dir="../outside")

    def test_dir_pointing_back_to_root_is_allowed(self, os_tmpdir):
        """Test that a dir resolving to the root itself is accepted."""
        assert resolve_base_dir(dir="sub/..") == str(os_tmpdir)

    def test_tmpdir_override(self, tmp_path, os_tmpdir):
        """Test that an existing override replaces the OS tmp dir."""
        other = tmp_path / "other-tmp"
        other.mkdir()

        assert resolve_base_dir(tmpdir=str(other), dir="sub") == str(other / "sub")

    def test_missing_tmpdir_override_is_rejected(self, tmp_path):
        """Test that the override must exist."""
        with pytest.raises(InvalidPathError, match="existing directory"):
            resolve_base_dir(tmpdir=str(tmp_path / "missing"))

    def test_tmpdir_override_must_be_a_directory(self, tmp_path):
        """Test that a file is not accepted as override."""
        some_file = tmp_path / "file"
        some_file.write_text("")

        with pytest.raises(InvalidPathError):
            resolve_base_dir(tmpdir=str(some_file))

    def test_result_is_absolute(self, os_tmpdir):
        """Test that the resolved base dir is absolute."""
        assert os.path.isabs(resolve_base_dir(dir="x"))
