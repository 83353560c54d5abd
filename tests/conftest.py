"""Shared fixtures for tmpsweep tests."""

import pytest

from tmpsweep import GarbageCollector


@pytest.fixture
def collector():
    """A fresh garbage collector without an exit hook, swept after the test."""
    gc = GarbageCollector()
    yield gc
    gc.set_force_clean(True)
    gc.dispose_all()


@pytest.fixture
def os_tmpdir(tmp_path, monkeypatch):
    """Point the OS tmp dir at this test's tmp_path."""
    import tempfile

    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    return tmp_path
