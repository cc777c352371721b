"""Lazily listed directory trees."""

from .metrics import DirectoryMetrics, calculate_directory_metrics
from .tree import (
    DirectoryEntry,
    DirectoryNode,
    FileEntry,
    OtherEntry,
    SubdirectoryEntry,
)

__all__ = [
    "DirectoryEntry",
    "DirectoryNode",
    "FileEntry",
    "OtherEntry",
    "SubdirectoryEntry",
    "DirectoryMetrics",
    "calculate_directory_metrics",
]
