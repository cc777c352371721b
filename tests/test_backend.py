"""Tests for the local filesystem backend."""

import os

import pytest

from lazy_fs.backend import ListedEntry, LocalFilesystem
from lazy_fs.types import EntryKind, FileMode


class TestLocalFilesystem:
    """Test host filesystem access."""

    def setup_method(self):
        """Set up test environment."""
        self.backend = LocalFilesystem()

    def test_list_directory(self, sample_file_structure):
        """Test listing classifies files and directories."""
        listing = self.backend.list_directory(str(sample_file_structure))

        assert sorted(listing, key=lambda item: item.name) == [
            ListedEntry("a.txt", str(sample_file_structure / "a.txt"), EntryKind.file),
            ListedEntry("sub", str(sample_file_structure / "sub"), EntryKind.directory),
        ]

    def test_list_directory_symlink_not_followed(self, temp_dir):
        """Test symlinks are classified as symlinks, even dangling ones."""
        os.symlink(temp_dir / "missing", temp_dir / "dangling")

        (entry,) = self.backend.list_directory(str(temp_dir))

        assert entry.kind == EntryKind.symlink

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
    def test_list_directory_special_file(self, temp_dir):
        """Test special files are classified as other."""
        os.mkfifo(temp_dir / "pipe")

        (entry,) = self.backend.list_directory(str(temp_dir))

        assert entry.kind == EntryKind.other

    def test_list_missing_directory(self, temp_dir):
        """Test listing a missing directory raises the host error."""
        with pytest.raises(FileNotFoundError):
            self.backend.list_directory(str(temp_dir / "missing"))

    @pytest.mark.parametrize(
        "mode, readable, writable",
        [
            (FileMode.read, True, False),
            (FileMode.write, False, True),
            (FileMode.append, False, True),
            (FileMode.read_write, True, True),
        ],
    )
    def test_open_flags(self, temp_dir, mode, readable, writable):
        """Test each mode opens the file with matching access."""
        path = temp_dir / "file.bin"
        path.write_bytes(b"x")

        with self.backend.open(str(path), mode) as handle:
            assert handle.readable() is readable
            assert handle.writable() is writable
