"""Tests for candidate name generation."""

import os

import pytest

from tmpsweep import InvalidNameError, naming
from tmpsweep.naming import (
    RANDOM_CHARS,
    NameSpec,
    generate_candidates,
    random_segment,
)


class TestRandomSegment:
    """Tests for random_segment."""

    def test_alphabet_has_62_symbols(self):
        """Test that the random alphabet is alphanumeric."""
        assert len(set(RANDOM_CHARS)) == 62
        assert RANDOM_CHARS.isalnum()

    def test_length_and_charset(self):
        """Test the segment has the requested length and only uses the alphabet."""
        segment = random_segment(24)

        assert len(segment) == 24
        assert set(segment) <= set(RANDOM_CHARS)


class TestNameSpec:
    """Tests for NameSpec validation and clamping."""

    @pytest.mark.parametrize(
        ("given", "expected"),
        [(1, 6), (6, 6), (12, 12), (24, 24), (100, 24), (-5, 6), (8.7, 8)],
    )
    def test_length_is_clamped(self, tmp_path, given, expected):
        """Test that length is clamped to [6, 24]."""
        assert NameSpec(base_dir=str(tmp_path), length=given).length == expected

    @pytest.mark.parametrize(("given", "expected"), [(0, 1), (3, 3), (10, 10), (50, 10)])
    def test_tries_is_clamped(self, tmp_path, given, expected):
        """Test that tries is clamped to [1, 10]."""
        assert NameSpec(base_dir=str(tmp_path), tries=given).tries == expected

    def test_non_numeric_length_is_rejected(self, tmp_path):
        """Test that a non numeric length raises InvalidNameError."""
        with pytest.raises(InvalidNameError):
            NameSpec(base_dir=str(tmp_path), length="twelve")

    @pytest.mark.parametrize("field", ["prefix", "postfix", "fixed_name"])
    def test_separator_in_fragment_is_rejected(self, tmp_path, field):
        """Test that fragments must not contain path separators."""
        with pytest.raises(InvalidNameError, match="path separator"):
            NameSpec(base_dir=str(tmp_path), **{field: f"a{os.sep}b"})

    @pytest.mark.parametrize("fixed_name", [".", ".."])
    def test_dot_names_are_rejected(self, tmp_path, fixed_name):
        """Test that '.' and '..' are not accepted as fixed names."""
        with pytest.raises(InvalidNameError):
            NameSpec(base_dir=str(tmp_path), fixed_name=fixed_name)

    def test_relative_base_dir_is_rejected(self):
        """Test that the base dir must be absolute."""
        with pytest.raises(InvalidNameError):
            NameSpec(base_dir="relative/dir")


class TestGenerateCandidates:
    """Tests for generate_candidates."""

    def test_default_shape(self, tmp_path):
        """Test the default candidate is <base>/tmp-<pid>-<random>."""
        spec = NameSpec(base_dir=str(tmp_path))

        candidate = next(generate_candidates(spec))
        prefix, token, random_part = os.path.basename(candidate).split("-")

        assert os.path.dirname(candidate) == str(tmp_path)
        assert prefix == "tmp"
        assert token == str(os.getpid())
        assert len(random_part) == 12

    def test_postfix_is_appended_verbatim(self, tmp_path):
        """Test that the postfix follows the random part directly."""
        spec = NameSpec(base_dir=str(tmp_path), prefix="report", postfix=".csv", length=6)

        name = os.path.basename(next(generate_candidates(spec)))

        assert name.startswith(f"report-{os.getpid()}-")
        assert name.endswith(".csv")
        assert len(name) == len(f"report-{os.getpid()}-") + 6 + len(".csv")

    def test_yields_tries_candidates(self, tmp_path):
        """Test that exactly `tries` candidates are produced."""
        spec = NameSpec(base_dir=str(tmp_path), tries=7)

        assert len(list(generate_candidates(spec))) == 7

    def test_fixed_name_yields_single_undecorated_candidate(self, tmp_path):
        """Test that a fixed name ignores prefix, postfix, length and tries."""
        spec = NameSpec(
            base_dir=str(tmp_path),
            fixed_name="fixed",
            prefix="p",
            postfix="q",
            length=20,
            tries=5,
        )

        assert list(generate_candidates(spec)) == [str(tmp_path / "fixed")]

    def test_undecorated_names_skip_token_and_dashes(self, tmp_path, monkeypatch):
        """Test the template style name layout."""
        monkeypatch.setattr(naming, "random_segment", lambda length: "a" * length)
        spec = NameSpec(base_dir=str(tmp_path), prefix="temp-", postfix=".x", length=6, decorated=False)

        assert next(generate_candidates(spec)) == str(tmp_path / "temp-aaaaaa.x")

    def test_candidates_stay_inside_base_dir(self, tmp_path):
        """Test that every candidate is a direct child of the base dir."""
        for spec in (
            NameSpec(base_dir=str(tmp_path)),
            NameSpec(base_dir=str(tmp_path), prefix="  spaced  ", postfix="-end", tries=10),
            NameSpec(base_dir=str(tmp_path), fixed_name="fixed"),
        ):
            for candidate in generate_candidates(spec):
                assert os.path.dirname(candidate) == str(tmp_path)
                assert os.sep not in os.path.basename(candidate)

    def test_candidates_are_generated_lazily(self, tmp_path, monkeypatch):
        """Test that no random segment is drawn before a candidate is requested."""
        calls = []
        monkeypatch.setattr(naming, "random_segment", lambda length: calls.append(length) or "x" * length)

        candidates = generate_candidates(NameSpec(base_dir=str(tmp_path)))
        assert calls == []

        next(candidates)
        assert calls == [12]
