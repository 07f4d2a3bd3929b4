"""
Error Taxonomy & Exception Handlers

Every failure the API can report is one of these exceptions. Upstream
failures are raised by the TMDB client, invalid requests by intent
parsing; only the handlers below turn them into HTTP responses.
"""

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from .logging import get_logger

logger = get_logger(__name__)


class MovieExplorerException(Exception):
    """Base exception for movie explorer errors."""

    code = "error"

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def details(self) -> Dict[str, Any]:
        """Extra fields merged into the error body."""
        return {}


class InvalidRequestError(MovieExplorerException):
    """Request parameters are missing or malformed. Never reaches upstream."""

    code = "invalid_request"

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(
            message=message or f"Missing or invalid parameter: {field}",
            status_code=400
        )

    def details(self) -> Dict[str, Any]:
        return {"field": self.field}


class UpstreamFailure(MovieExplorerException):
    """Base class for classified failures of a TMDB call."""


class RateLimitedError(UpstreamFailure):
    """TMDB answered 429. Not retried; the caller decides whether to try again."""

    code = "rate_limited"

    def __init__(self, message: str = "TMDB rate limit exceeded. Please try again later."):
        super().__init__(message=message, status_code=429)


class NotFoundError(UpstreamFailure):
    """TMDB answered 404."""

    code = "not_found"

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(
            message=f"Resource not found: {resource}",
            status_code=404
        )


class UnauthorizedError(UpstreamFailure):
    """No TMDB credential configured. A server misconfiguration, hence 500."""

    code = "missing_credential"

    def __init__(
        self,
        message: str = (
            "TMDB credential is not configured. "
            "Set TMDB_READ_ACCESS_TOKEN or TMDB_API_KEY."
        ),
    ):
        super().__init__(message=message, status_code=500)


class UpstreamError(UpstreamFailure):
    """
    Any other TMDB failure: non-2xx status, timeout, transport error
    or a payload with an unexpected shape.

    ``upstream_status`` is None when no HTTP response was received.
    """

    code = "upstream_error"

    def __init__(self, upstream_status: Optional[int], message: str):
        self.upstream_status = upstream_status
        super().__init__(message=message, status_code=500)

    def details(self) -> Dict[str, Any]:
        return {"upstream_status": self.upstream_status}


async def movie_explorer_exception_handler(
    request: Request,
    exc: MovieExplorerException
) -> JSONResponse:
    """Handle MovieExplorerException and return JSON response."""
    content: Dict[str, Any] = {
        "error": exc.message,
        "code": exc.code,
        "status_code": exc.status_code,
    }
    content.update(exc.details())
    return JSONResponse(status_code=exc.status_code, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: anything unexpected still leaves as JSON."""
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=500,
        content={
            "error": f"Internal server error: {exc}",
            "code": "internal_error",
            "status_code": 500,
        }
    )


async def catch_unhandled_exceptions(request: Request, call_next):
    """
    Last-resort handler as HTTP middleware. Must sit inside
    CORSMiddleware so internal errors still carry CORS headers.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI app.

    Call before adding CORSMiddleware: middleware added later wraps it.
    """
    app.add_exception_handler(MovieExplorerException, movie_explorer_exception_handler)
    app.middleware("http")(catch_unhandled_exceptions)
