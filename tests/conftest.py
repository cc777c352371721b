"""Test configuration and fixtures for lazy-fs."""

from collections import Counter

import pytest

from lazy_fs.backend import LocalFilesystem


class CountingFilesystem(LocalFilesystem):
    """LocalFilesystem that records how often each call is made."""

    def __init__(self):
        self.calls = Counter()
        self.listed = []

    def stat(self, path):
        self.calls["stat"] += 1
        return super().stat(path)

    def list_directory(self, path):
        self.calls["list_directory"] += 1
        self.listed.append(path)
        return super().list_directory(path)

    def open(self, path, mode):
        self.calls["open"] += 1
        return super().open(path, mode)


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_file_structure(temp_dir):
    """Create a sample file structure for testing tree operations."""
    (temp_dir / "a.txt").write_text("alpha")

    subdir = temp_dir / "sub"
    subdir.mkdir()
    (subdir / "b.txt").write_text("bravo" * 10)

    nested = subdir / "deeper"
    nested.mkdir()
    (nested / "c.txt").write_text("c")

    return temp_dir


@pytest.fixture
def counting_fs():
    """Backend that counts filesystem calls."""
    return CountingFilesystem()
