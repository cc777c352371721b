"""Mode-switchable file handles."""

from .handle import FileHandle

__all__ = ["FileHandle"]
