"""
Application Configuration

Load settings from environment variables with validation.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Environment
    environment: str = "development"
    debug: bool = True

    # TMDB credential (bearer token preferred over query-string key)
    tmdb_read_access_token: Optional[str] = None
    tmdb_api_key: Optional[str] = None

    # TMDB endpoints
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"
    tmdb_language: str = "ko-KR"
    tmdb_video_language: str = "en-US"  # English trailers are far more common
    tmdb_timeout_seconds: float = 10.0

    # CORS
    cors_allow_origins: List[str] = ["*"]

    # Rate Limiting (inbound)
    rate_limit_enabled: bool = True
    rate_limit_per_minute: int = 120

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
