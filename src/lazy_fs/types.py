"""Enumerations shared by file handles, directory trees and backends."""

from enum import Enum
from typing import Union

from lazy_fs.core.exceptions import InvalidModeError


class FileMode(str, Enum):
    """Access modes a FileHandle can be bound to."""

    read = "read"
    write = "write"
    append = "append"
    read_write = "read_write"

    @property
    def readable(self) -> bool:
        return self in (FileMode.read, FileMode.read_write)

    @property
    def writable(self) -> bool:
        return self is not FileMode.read

    @classmethod
    def parse(cls, mode: Union["FileMode", str]) -> "FileMode":
        """Resolve a FileMode from a member, its value or a Python mode string.

        Args:
            mode: A FileMode, one of its values, or one of the Python mode
                strings ``r``, ``w``, ``a``, ``r+`` (optionally with ``b``)

        Returns:
            The matching FileMode

        Raises:
            InvalidModeError: If the mode is unknown or has no FileMode
                equivalent (e.g. ``w+``, ``a+``, ``x``)
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            alias = _PYTHON_MODE_ALIASES.get(mode)
            if alias is not None:
                return alias
            try:
                return cls(mode)
            except ValueError:
                pass

        supported = ", ".join(member.value for member in cls)
        raise InvalidModeError(
            f"Unsupported file mode: {mode!r}. Supported modes: {supported}"
        )


_PYTHON_MODE_ALIASES = {
    "r": FileMode.read,
    "rb": FileMode.read,
    "w": FileMode.write,
    "wb": FileMode.write,
    "a": FileMode.append,
    "ab": FileMode.append,
    "r+": FileMode.read_write,
    "r+b": FileMode.read_write,
    "rb+": FileMode.read_write,
}


class EntryKind(str, Enum):
    """How a directory listing classified an entry.

    Symlinks are reported without being followed. Anything that is not a
    regular file, a directory or a symlink (fifos, sockets, devices) is
    ``other``.
    """

    file = "file"
    directory = "directory"
    symlink = "symlink"
    other = "other"
