"""
Movie Explorer API

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from .config import get_settings
from .core.logging import setup_logging, get_logger
from .core.exceptions import register_exception_handlers
from .core.middleware import empty_preflight_body
from .core.rate_limit import limiter
from .routers import tmdb_router, process_data_router
from .services.tmdb_client import TMDBCredential

# Initialize
settings = get_settings()
setup_logging(settings)
logger = get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    credential = TMDBCredential.from_settings(settings)
    logger.info(
        "app_startup",
        environment=settings.environment,
        debug=settings.debug,
        tmdb_auth="bearer" if credential and credential.bearer_token
        else "api_key" if credential else "none",
    )
    if credential is None:
        # Boot anyway; every catalog request answers 500 until configured
        logger.error("tmdb_credential_missing")

    yield

    logger.info("app_shutdown")


# Create FastAPI app
app = FastAPI(
    title="Movie Explorer API",
    description="Aggregates and normalizes TMDB movie metadata for the browsing UI",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Register exception handlers (inside CORS)
register_exception_handlers(app)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Outermost: empties CORS preflight bodies
app.middleware("http")(empty_preflight_body)

# Include routers
app.include_router(tmdb_router)
app.include_router(process_data_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Movie Explorer API",
        "version": VERSION,
        "status": "running",
        "docs": "/docs" if settings.debug else "disabled",
    }


@app.get("/health")
async def health():
    """Health check for load balancers."""
    return {"status": "healthy"}
