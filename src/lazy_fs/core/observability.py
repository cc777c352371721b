"""Observability setup for lazy-fs.

Logging goes through structlog on top of stdlib logging; tracing uses
OpenTelemetry and stays a no-op unless ``LAZY_FS_OTEL_ENABLED`` is set.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .config import settings


def setup_tracing() -> None:
    """Install a console-exporting tracer provider when tracing is enabled."""
    if not settings.otel_enabled:
        return

    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)


def setup_logging(level: Optional[str] = None) -> None:
    """Route lazy-fs logs through structlog as JSON lines.

    Existing stdlib handlers and an existing structlog configuration are
    left untouched; only the ``lazy_fs`` logger level is always applied.

    Args:
        level: Log level name for the ``lazy_fs`` logger; defaults to
            ``settings.log_level``
    """
    level_name = (level or settings.log_level).upper()

    # Applications that configured logging themselves keep their handlers.
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("lazy_fs").setLevel(getattr(logging, level_name))

    # Same for structlog: an application's own configuration wins.
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance."""
    return structlog.get_logger(name)


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer for spans around filesystem calls."""
    return trace.get_tracer(name)


# Initialize on import
setup_logging()
setup_tracing()
