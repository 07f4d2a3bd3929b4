"""
Structured Logging Configuration

structlog on top of stdlib logging. Console output in development,
one JSON object per line everywhere else.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import Processor

from ..config import Settings, get_settings

# httpx logs every request line at INFO; tmdb_client already logs its calls
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(settings: Optional[Settings] = None, log_level: Optional[str] = None):
    """
    Configure structured logging for the application.

    Args:
        settings: Settings to read environment/debug from (defaults to cached settings)
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR)
    """
    settings = settings or get_settings()

    if log_level is None:
        log_level = "DEBUG" if settings.debug else "INFO"
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.environment == "development":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
        processors = shared_processors + [renderer]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "movie_explorer") -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
