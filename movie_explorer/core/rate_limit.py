"""
Inbound Rate Limiting

One slowapi limiter shared by the app and every router.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config import get_settings

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)

DEFAULT_LIMIT = f"{settings.rate_limit_per_minute}/minute"
