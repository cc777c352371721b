"""Mode-switchable file handles.

A FileHandle owns exactly one native file object at a time. Changing its
mode flushes and closes that object and opens the path again with the new
flags, so every transition costs a close and an open on the host.

    >>> from lazy_fs import FileHandle
    >>> handle = FileHandle.create("notes.txt")
    >>> handle.write(b"hello")
    5
    >>> handle.to_read()
    >>> handle.read()
    b'hello'
    >>> handle.close()
"""

import io
import os
from typing import BinaryIO, Optional, Union

from lazy_fs.backend import FilesystemBackend, local_filesystem
from lazy_fs.core import get_logger, get_tracer, settings
from lazy_fs.core.exceptions import (
    FileSystemIOError,
    InvalidOperationError,
    LazyFSError,
    translate_os_error,
)
from lazy_fs.schemas import FileMetadata
from lazy_fs.types import FileMode

logger = get_logger(__name__)
tracer = get_tracer(__name__)

PathLike = Union[str, os.PathLike]


class FileHandle:
    """A file opened in one FileMode that can be reopened in another.

    Attributes:
        path: Path the handle was opened on; never changes
        mode: Current FileMode, or None after a failed transition
        error: The error that broke the handle, if the last transition failed
    """

    def __init__(
        self,
        path: PathLike,
        mode: Union[FileMode, str] = FileMode.read,
        *,
        backend: Optional[FilesystemBackend] = None,
    ):
        self._path = os.fspath(path)
        self._backend = backend or local_filesystem
        self._file: Optional[BinaryIO] = None
        self._mode: Optional[FileMode] = None
        self._error: Optional[LazyFSError] = None
        self._closed = False

        target = FileMode.parse(mode)
        try:
            self._file = self._backend.open(self._path, target)
        except OSError as e:
            raise translate_os_error(e, self._path) from e
        self._mode = target
        logger.debug("Opened file handle", path=self._path, mode=target.value)

    @classmethod
    def create(
        cls, path: PathLike, *, backend: Optional[FilesystemBackend] = None
    ) -> "FileHandle":
        """Create or truncate ``path`` and open it write-only."""
        return cls(path, FileMode.write, backend=backend)

    @classmethod
    def open(
        cls, path: PathLike, *, backend: Optional[FilesystemBackend] = None
    ) -> "FileHandle":
        """Open an existing file read-only.

        Raises:
            PathNotFoundError: If ``path`` does not exist
            PermissionDeniedError: If ``path`` is not readable
        """
        return cls(path, FileMode.read, backend=backend)

    @classmethod
    def open_with_mode(
        cls,
        path: PathLike,
        mode: Union[FileMode, str],
        *,
        backend: Optional[FilesystemBackend] = None,
    ) -> "FileHandle":
        """Open ``path`` in the given mode.

        Raises:
            InvalidModeError: If ``mode`` is not a supported FileMode
            PathNotFoundError: If ``path`` must exist for ``mode`` and does not
            NotAFileError: If ``path`` is a directory
            PermissionDeniedError: If the host refuses the access
        """
        return cls(path, mode, backend=backend)

    @property
    def path(self) -> str:
        return self._path

    @property
    def mode(self) -> Optional[FileMode]:
        return self._mode

    @property
    def error(self) -> Optional[LazyFSError]:
        return self._error

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def usable(self) -> bool:
        return self._file is not None

    def to_read(self) -> None:
        self.switch_mode(FileMode.read)

    def to_write(self) -> None:
        """Reopen write-only; like ``create`` this truncates the file."""
        self.switch_mode(FileMode.write)

    def to_append(self) -> None:
        self.switch_mode(FileMode.append)

    def to_read_write(self) -> None:
        self.switch_mode(FileMode.read_write)

    def switch_mode(self, mode: Union[FileMode, str]) -> None:
        """Flush, close and reopen the file in ``mode``.

        The reopen happens even when ``mode`` is the current mode, which
        resets the stream position. If any step fails the handle is left
        without a native file: ``mode`` becomes None, ``error`` holds the
        failure and I/O raises InvalidOperationError until a later
        transition succeeds.

        Raises:
            InvalidOperationError: If the handle was closed
            InvalidModeError: If ``mode`` is not a supported FileMode
            LazyFSError: The translated host error if flushing, closing or
                reopening fails
        """
        if self._closed:
            raise InvalidOperationError(
                f"{self._path}: cannot change the mode of a closed handle",
                self._path,
            )

        target = FileMode.parse(mode)
        previous = self._mode

        with tracer.start_as_current_span("lazy_fs.file.switch_mode") as span:
            span.set_attribute("lazy_fs.path", self._path)
            span.set_attribute("lazy_fs.mode", target.value)
            try:
                self._release()
                self._file = self._backend.open(self._path, target)
            except OSError as e:
                self._mode = None
                self._error = translate_os_error(e, self._path)
                logger.debug(
                    "File mode switch failed",
                    path=self._path,
                    mode=target.value,
                    error=str(self._error),
                )
                raise self._error from e

        self._mode = target
        self._error = None
        logger.debug(
            "Switched file mode",
            path=self._path,
            from_mode=previous.value if previous else None,
            to_mode=target.value,
        )

    def read(self, size: int = -1) -> bytes:
        return self._call("read", size)

    def readinto(self, buffer) -> int:
        return self._call("readinto", buffer)

    def read_text(self, encoding: Optional[str] = None) -> str:
        """Read the rest of the file and decode it.

        Raises:
            FileSystemIOError: If the bytes are not valid in ``encoding`` or
                the encoding is unknown
        """
        data = self.read()
        encoding = encoding or settings.text_encoding
        try:
            return data.decode(encoding)
        except (UnicodeError, LookupError) as e:
            raise FileSystemIOError(
                f"{self._path}: cannot decode as {encoding}: {e}", self._path
            ) from e

    def write(self, data: bytes) -> int:
        return self._call("write", data)

    def write_text(self, text: str, encoding: Optional[str] = None) -> int:
        encoding = encoding or settings.text_encoding
        try:
            data = text.encode(encoding)
        except (UnicodeError, LookupError) as e:
            raise FileSystemIOError(
                f"{self._path}: cannot encode as {encoding}: {e}", self._path
            ) from e
        return self.write(data)

    def flush(self) -> None:
        self._call("flush")

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._call("seek", offset, whence)

    def tell(self) -> int:
        return self._call("tell")

    def fileno(self) -> int:
        return self._call("fileno")

    def metadata(self) -> FileMetadata:
        """Return the file's current metadata from the host."""
        try:
            result = self._backend.stat(self._path)
        except OSError as e:
            raise translate_os_error(e, self._path) from e
        return FileMetadata.from_stat(self._path, result)

    def close(self) -> None:
        """Flush and release the native file. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._mode = None
        try:
            self._release()
        except OSError as e:
            raise translate_os_error(e, self._path) from e
        logger.debug("Closed file handle", path=self._path)

    def _release(self) -> None:
        handle, self._file = self._file, None
        if handle is None:
            return
        try:
            handle.flush()
        finally:
            handle.close()

    def _call(self, operation: str, *args):
        if self._file is None:
            if self._closed:
                reason = "handle is closed"
            else:
                reason = f"handle is unusable after a failed mode switch ({self._error})"
            raise InvalidOperationError(
                f"{self._path}: cannot {operation}, {reason}", self._path
            )
        try:
            return getattr(self._file, operation)(*args)
        except OSError as e:
            raise translate_os_error(e, self._path) from e

    def __enter__(self) -> "FileHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        mode = self._mode.value if self._mode else None
        return f"FileHandle(path={self._path!r}, mode={mode!r}, closed={self._closed})"
