"""File count and size totals for directory trees."""

from dataclasses import dataclass

from lazy_fs.core import get_logger
from lazy_fs.core.exceptions import translate_os_error

from .tree import DirectoryNode

logger = get_logger(__name__)


@dataclass(frozen=True)
class DirectoryMetrics:
    """Metrics about a directory's contents.

    Attributes:
        file_count: Number of files reachable from the directory
        total_bytes: Total size in bytes of those files
    """

    file_count: int
    total_bytes: int


def calculate_directory_metrics(node: DirectoryNode) -> DirectoryMetrics:
    """Count the files reachable from ``node`` and sum their sizes.

    Files are those ``node.flatten_all()`` returns, so a non-recursive node
    only counts its own files. Each file is stat'ed once.

    Args:
        node: Directory to measure; listed as needed

    Returns:
        DirectoryMetrics containing file count and total size

    Raises:
        LazyFSError: If a directory cannot be listed or a file cannot be
            stat'ed
    """
    file_count = 0
    total_bytes = 0
    for entry in node.iter_files():
        try:
            result = node.backend.stat(entry.path)
        except OSError as e:
            raise translate_os_error(e, entry.path) from e
        file_count += 1
        total_bytes += result.st_size

    metrics = DirectoryMetrics(file_count=file_count, total_bytes=total_bytes)
    logger.debug(
        "Directory metrics calculated",
        path=node.path,
        file_count=metrics.file_count,
        total_bytes=metrics.total_bytes,
    )
    return metrics
