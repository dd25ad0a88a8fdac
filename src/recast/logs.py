"""Logging setup.

Client events go through structlog to the standard library logger named
``recast``, which carries a ``NullHandler``. Nothing is written anywhere
until the application either configures standard logging or calls
``configure_logging`` once at startup.
"""

import logging
import sys

import structlog

from recast.config import get_settings

LOGGER_NAME = "recast"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(**initial_values):
    """Return a structlog logger writing to the ``recast`` stdlib logger."""
    return structlog.wrap_logger(logging.getLogger(LOGGER_NAME), **initial_values)


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog and print the Recast client's events to stdout.

    Args:
        level: Minimum level name (defaults to RECAST_LOG_LEVEL)
        fmt: "console" or "json" (defaults to RECAST_LOG_FORMAT)
    """
    if level is None or fmt is None:
        settings = get_settings()
        level = level or settings.log_level
        fmt = fmt or settings.log_format

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Events are already rendered by structlog
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.handlers = [logging.NullHandler(), handler]
    stdlib_logger.setLevel(numeric_level)
    stdlib_logger.propagate = False
