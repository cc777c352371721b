"""Mode-switchable file handles and lazily listed directory trees.

This package is a thin convenience layer over the host filesystem. It is
synchronous and single-threaded; nothing is locked and nothing is retried.

Key Features:
    - File handles that reopen themselves to change access mode
    - Directory trees that list each directory only when first needed
    - Depth-first flattening of a tree into its files
    - Explicit cache refresh; no change detection

Recommended Usage:

    >>> from lazy_fs import DirectoryNode, FileHandle
    >>> handle = FileHandle.create("out.txt")
    >>> handle.write(b"data")
    4
    >>> handle.to_read()
    >>> handle.read()
    b'data'
    >>> tree = DirectoryNode(".", recursive=True)
    >>> paths = [entry.path for entry in tree.flatten_all()]

Advanced Usage:
    Substitute the filesystem used by handles and trees:

    >>> from lazy_fs.backend import FilesystemBackend, LocalFilesystem
"""

__version__ = "0.1.0"

from .backend import FilesystemBackend, ListedEntry, LocalFilesystem
from .core.exceptions import (
    ErrorKind,
    FileSystemIOError,
    InvalidModeError,
    InvalidOperationError,
    LazyFSError,
    NotADirectoryPathError,
    NotAFileError,
    PathNotFoundError,
    PermissionDeniedError,
)
from .directories import (
    DirectoryEntry,
    DirectoryMetrics,
    DirectoryNode,
    FileEntry,
    OtherEntry,
    SubdirectoryEntry,
    calculate_directory_metrics,
)
from .files import FileHandle
from .schemas import FileMetadata
from .types import EntryKind, FileMode

__all__ = [
    # File handles
    "FileHandle",
    "FileMode",
    "FileMetadata",
    # Directory trees
    "DirectoryNode",
    "DirectoryEntry",
    "FileEntry",
    "SubdirectoryEntry",
    "OtherEntry",
    "EntryKind",
    "DirectoryMetrics",
    "calculate_directory_metrics",
    # Filesystem access
    "FilesystemBackend",
    "ListedEntry",
    "LocalFilesystem",
    # Errors
    "ErrorKind",
    "LazyFSError",
    "PathNotFoundError",
    "NotADirectoryPathError",
    "NotAFileError",
    "PermissionDeniedError",
    "InvalidModeError",
    "InvalidOperationError",
    "FileSystemIOError",
]
