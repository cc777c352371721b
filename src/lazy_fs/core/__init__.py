"""Core utilities and shared components for lazy-fs."""

from .config import settings
from .exceptions import LazyFSError, translate_os_error
from .observability import get_logger, get_tracer

__all__ = ["settings", "LazyFSError", "translate_os_error", "get_logger", "get_tracer"]
