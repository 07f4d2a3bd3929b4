"""Core infrastructure modules."""

from .exceptions import (
    MovieExplorerException,
    InvalidRequestError,
    UpstreamFailure,
    RateLimitedError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
)
from .logging import setup_logging, get_logger

__all__ = [
    "MovieExplorerException",
    "InvalidRequestError",
    "UpstreamFailure",
    "RateLimitedError",
    "NotFoundError",
    "UnauthorizedError",
    "UpstreamError",
    "setup_logging",
    "get_logger",
]
