"""Host filesystem access used by file handles and directory trees.

Everything lazy-fs does to the filesystem goes through a FilesystemBackend:
``stat``, ``list_directory`` and ``open``. LocalFilesystem talks to the host
OS; tests and callers can substitute their own implementation.
"""

import os
from dataclasses import dataclass
from typing import BinaryIO, Protocol

from lazy_fs.types import EntryKind, FileMode

_OPEN_FLAGS = {
    FileMode.read: "rb",
    FileMode.write: "wb",
    FileMode.append: "ab",
    FileMode.read_write: "r+b",
}


@dataclass(frozen=True)
class ListedEntry:
    """One entry returned by a directory listing.

    Attributes:
        name: Entry name within its directory
        path: Full path of the entry
        kind: Classification from the non-dereferencing file type
    """

    name: str
    path: str
    kind: EntryKind


class FilesystemBackend(Protocol):
    """Protocol for the filesystem calls lazy-fs depends on."""

    def stat(self, path: str) -> os.stat_result:
        """Return the stat of ``path``, following symlinks."""
        ...

    def list_directory(self, path: str) -> list[ListedEntry]:
        """List the direct children of ``path`` in host order."""
        ...

    def open(self, path: str, mode: FileMode) -> BinaryIO:
        """Open ``path`` with the host flags matching ``mode``."""
        ...


class LocalFilesystem:
    """FilesystemBackend backed by the host operating system.

    Errors are raised as the OSError the host reports.
    """

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def list_directory(self, path: str) -> list[ListedEntry]:
        with os.scandir(path) as entries:
            return [
                ListedEntry(name=entry.name, path=entry.path, kind=_classify(entry))
                for entry in entries
            ]

    def open(self, path: str, mode: FileMode) -> BinaryIO:
        return open(path, _OPEN_FLAGS[mode])


def _classify(entry: os.DirEntry) -> EntryKind:
    if entry.is_symlink():
        return EntryKind.symlink
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.directory
    if entry.is_file(follow_symlinks=False):
        return EntryKind.file
    return EntryKind.other


local_filesystem = LocalFilesystem()
