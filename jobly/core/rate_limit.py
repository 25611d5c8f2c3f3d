"""
Rate limiting configuration using slowapi.

Uses Redis as the backend so limits are shared across workers.
Only write routes are limited; reads stay open.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from jobly.core.config import settings


def _get_user_or_ip(request: Request) -> str:
    """
    Rate-limit key: token subject if the admin guard ran, otherwise client IP.
    """
    user = getattr(request.state, "current_user", None)
    if user and getattr(user, "username", None):
        return user.username
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_user_or_ip,
    storage_uri=settings.limiter_storage_url,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_WRITE)
RATE_WRITE = "30/minute"  # create, update, delete
