"""Exception hierarchy for lazy-fs."""

import errno
import io
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failure reported by lazy-fs operations."""

    not_found = "not_found"
    not_a_directory = "not_a_directory"
    not_a_file = "not_a_file"
    permission_denied = "permission_denied"
    invalid_mode = "invalid_mode"
    invalid_operation = "invalid_operation"
    io = "io"


class LazyFSError(Exception):
    """Base exception for all lazy-fs errors.

    Attributes:
        path: Filesystem path the failed operation was working on, if any
        kind: The ErrorKind of the failure
    """

    kind: ErrorKind = ErrorKind.io

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(LazyFSError):
    """Raised when a path does not exist."""

    kind = ErrorKind.not_found


class NotADirectoryPathError(LazyFSError):
    """Raised when a directory was expected but the path is something else."""

    kind = ErrorKind.not_a_directory


class NotAFileError(LazyFSError):
    """Raised when a regular file was expected but the path is something else."""

    kind = ErrorKind.not_a_file


class PermissionDeniedError(LazyFSError):
    """Raised when the host refuses the requested access."""

    kind = ErrorKind.permission_denied


class InvalidModeError(LazyFSError):
    """Raised when a file mode is unknown or unsupported."""

    kind = ErrorKind.invalid_mode


class InvalidOperationError(LazyFSError):
    """Raised when an operation is not allowed in the handle's current state."""

    kind = ErrorKind.invalid_operation


class FileSystemIOError(LazyFSError):
    """Raised for any other host I/O failure."""

    kind = ErrorKind.io


_ERRNO_ERRORS = {
    errno.ENOENT: PathNotFoundError,
    errno.ENOTDIR: NotADirectoryPathError,
    errno.EISDIR: NotAFileError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
}


def translate_os_error(error: OSError, path: Optional[str] = None) -> LazyFSError:
    """Map a host OSError onto the lazy-fs exception hierarchy.

    Args:
        error: The error raised by the host filesystem call
        path: Path the call was made on, used when the error carries none

    Returns:
        A LazyFSError subclass instance; callers raise it chained to ``error``
    """
    path = path if path is not None else error.filename
    reason = error.strerror or str(error) or type(error).__name__
    message = f"{path}: {reason}" if path else reason

    if isinstance(error, io.UnsupportedOperation):
        return InvalidOperationError(
            f"{path}: '{error}' is not supported by the current mode", path
        )
    if isinstance(error, FileNotFoundError):
        return PathNotFoundError(message, path)
    if isinstance(error, NotADirectoryError):
        return NotADirectoryPathError(message, path)
    if isinstance(error, IsADirectoryError):
        return NotAFileError(message, path)
    if isinstance(error, PermissionError):
        return PermissionDeniedError(message, path)

    error_class = _ERRNO_ERRORS.get(error.errno, FileSystemIOError)
    return error_class(message, path)
