"""Lazily listed directory trees.

A DirectoryNode validates its path when constructed but does not list it
until its children are first asked for. The listing is cached until
``refresh`` is called; the tree never notices changes on disk by itself.

Recursive nodes create an unlisted child DirectoryNode for every
subdirectory they find, so flattening can descend the whole tree one
listing at a time. Non-recursive nodes only record subdirectory paths.

Symlinks are never followed. They, and anything else that is neither a
regular file nor a directory, are reported as OtherEntry and left out of
flattened listings.
"""

import os
import stat
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from lazy_fs.backend import FilesystemBackend, ListedEntry, local_filesystem
from lazy_fs.core import get_logger, get_tracer
from lazy_fs.core.exceptions import NotADirectoryPathError, translate_os_error
from lazy_fs.files import FileHandle
from lazy_fs.types import EntryKind, FileMode

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class FileEntry:
    """A regular file found in a directory listing."""

    name: str
    path: str
    backend: FilesystemBackend = field(
        default=local_filesystem, repr=False, compare=False
    )

    @property
    def kind(self) -> EntryKind:
        return EntryKind.file

    def open(self, mode: Union[FileMode, str] = FileMode.read) -> FileHandle:
        """Open this file as a FileHandle."""
        return FileHandle(self.path, mode, backend=self.backend)

    def __fspath__(self) -> str:
        return self.path


@dataclass(frozen=True)
class SubdirectoryEntry:
    """A subdirectory found in a directory listing.

    Attributes:
        node: Unlisted DirectoryNode for the subdirectory when the parent is
            recursive, otherwise None
    """

    name: str
    path: str
    node: Optional["DirectoryNode"] = None

    @property
    def kind(self) -> EntryKind:
        return EntryKind.directory

    def __fspath__(self) -> str:
        return self.path


@dataclass(frozen=True)
class OtherEntry:
    """A symlink or special file; never opened, followed or flattened."""

    name: str
    path: str
    kind: EntryKind

    def __fspath__(self) -> str:
        return self.path


DirectoryEntry = Union[FileEntry, SubdirectoryEntry, OtherEntry]


class DirectoryNode:
    """One directory and, once listed, its direct children.

    Args:
        path: Directory to represent
        recursive: Whether subdirectories become DirectoryNodes that
            flattening descends into
        backend: Filesystem implementation, defaults to the host

    Raises:
        PathNotFoundError: If ``path`` does not exist
        NotADirectoryPathError: If ``path`` is not a directory
    """

    def __init__(
        self,
        path: Union[str, os.PathLike],
        recursive: bool = True,
        *,
        backend: Optional[FilesystemBackend] = None,
    ):
        self._setup(os.fspath(path), recursive, backend or local_filesystem)

        try:
            result = self._backend.stat(self._path)
        except OSError as e:
            raise translate_os_error(e, self._path) from e
        if not stat.S_ISDIR(result.st_mode):
            raise NotADirectoryPathError(
                f"Path {self._path} is not a directory", self._path
            )

    @classmethod
    def _from_listing(
        cls, path: str, recursive: bool, backend: FilesystemBackend
    ) -> "DirectoryNode":
        # The parent's listing already classified the path as a directory.
        node = cls.__new__(cls)
        node._setup(path, recursive, backend)
        return node

    def _setup(self, path: str, recursive: bool, backend: FilesystemBackend) -> None:
        self._path = path
        self._recursive = recursive
        self._backend = backend
        self._children: Optional[dict[str, DirectoryEntry]] = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return os.path.basename(os.path.normpath(self._path))

    @property
    def recursive(self) -> bool:
        return self._recursive

    @property
    def backend(self) -> FilesystemBackend:
        return self._backend

    @property
    def loaded(self) -> bool:
        return self._children is not None

    def children(self) -> Mapping[str, DirectoryEntry]:
        """Return the direct children, listing the directory on first use.

        Returns:
            Read-only mapping of entry name to entry, in listing order

        Raises:
            LazyFSError: If the directory can no longer be listed; the node
                stays unloaded
        """
        if self._children is None:
            self._children = self._scan()
        return MappingProxyType(self._children)

    def refresh(self) -> None:
        """Forget the cached listing, including any listed subtrees."""
        self._children = None
        logger.debug("Directory cache cleared", path=self._path)

    def get(self, name: str) -> Optional[DirectoryEntry]:
        return self.children().get(name)

    def walk(self, depth: int = 0) -> None:
        """List this directory and its subdirectories ahead of time.

        Args:
            depth: How many levels of subdirectories to list below this one;
                0 lists all of them. Only recursive nodes have
                subdirectories to descend into.
        """
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        self._load(None if depth == 0 else depth)

    def _load(self, remaining: Optional[int]) -> None:
        children = self.children()
        if remaining == 0:
            return
        below = None if remaining is None else remaining - 1
        for entry in children.values():
            if isinstance(entry, SubdirectoryEntry) and entry.node is not None:
                entry.node._load(below)

    def iter_files(self) -> Iterator[FileEntry]:
        """Yield files depth-first, listing directories as they are reached.

        Uses an explicit stack, so tree depth is not bounded by the
        interpreter's recursion limit.
        """
        return self._iter_files(cached_only=False)

    def flatten_all(self) -> list[FileEntry]:
        """Collect every reachable file, listing directories as needed.

        Order follows the host's listing order and is not sorted. A
        non-recursive node only returns its own files.
        """
        return list(self.iter_files())

    def flatten_cached(self) -> list[FileEntry]:
        """Collect files from the already listed part of the tree only."""
        return list(self._iter_files(cached_only=True))

    def _iter_files(self, cached_only: bool) -> Iterator[FileEntry]:
        stack = [self._entries(cached_only)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
            elif isinstance(entry, FileEntry):
                yield entry
            elif isinstance(entry, SubdirectoryEntry) and entry.node is not None:
                stack.append(entry.node._entries(cached_only))

    def _entries(self, cached_only: bool) -> Iterator[DirectoryEntry]:
        if cached_only:
            return iter(list(self._children.values()) if self._children else [])
        return iter(list(self.children().values()))

    def render(self, indent: str = "  ") -> str:
        """Render the listed part of the tree as indented text.

        Unlisted directories appear without contents; nothing is read from
        the filesystem.
        """
        lines = [f"{self.name}/"]
        self._render_into(lines, indent, 1)
        return "\n".join(lines)

    def _render_into(self, lines: list[str], indent: str, level: int) -> None:
        if self._children is None:
            return
        prefix = indent * level
        for entry in self._children.values():
            if isinstance(entry, SubdirectoryEntry):
                lines.append(f"{prefix}{entry.name}/")
                if entry.node is not None:
                    entry.node._render_into(lines, indent, level + 1)
            elif isinstance(entry, OtherEntry):
                lines.append(f"{prefix}{entry.name} ({entry.kind.value})")
            else:
                lines.append(f"{prefix}{entry.name}")

    def _scan(self) -> dict[str, DirectoryEntry]:
        with tracer.start_as_current_span("lazy_fs.directory.list") as span:
            span.set_attribute("lazy_fs.path", self._path)
            try:
                listing = self._backend.list_directory(self._path)
            except OSError as e:
                logger.debug("Directory listing failed", path=self._path, error=str(e))
                raise translate_os_error(e, self._path) from e

            entries = {item.name: self._make_entry(item) for item in listing}
            span.set_attribute("lazy_fs.entry_count", len(entries))

        logger.debug("Directory listed", path=self._path, entry_count=len(entries))
        return entries

    def _make_entry(self, item: ListedEntry) -> DirectoryEntry:
        if item.kind == EntryKind.file:
            return FileEntry(name=item.name, path=item.path, backend=self._backend)
        if item.kind == EntryKind.directory:
            node = None
            if self._recursive:
                node = DirectoryNode._from_listing(item.path, True, self._backend)
            return SubdirectoryEntry(name=item.name, path=item.path, node=node)
        return OtherEntry(name=item.name, path=item.path, kind=item.kind)

    def __iter__(self) -> Iterator[DirectoryEntry]:
        return iter(list(self.children().values()))

    def __len__(self) -> int:
        return len(self.children())

    def __contains__(self, name: object) -> bool:
        return name in self.children()

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return (
            f"DirectoryNode(path={self._path!r}, recursive={self._recursive}, "
            f"loaded={self.loaded})"
        )
