"""
Liveness of the API and the services behind it.
"""
from datetime import datetime, timezone
from typing import Dict

import redis.asyncio as redis
from fastapi import APIRouter, Depends

from jobly.core.config import settings
from jobly.core.database import Database, get_db
from jobly.core.logging import get_logger
from jobly.schemas.base import BaseSchema

logger = get_logger(__name__)

router = APIRouter(tags=["health"])

HEALTHY = "healthy"


class HealthResponse(BaseSchema):
    status: str
    timestamp: str
    checks: Dict[str, str]


async def _check_database(db: Database) -> str:
    try:
        await db.ping()
    except Exception as exc:
        logger.warning("health_check_failed", service="database", error=str(exc))
        return f"unhealthy: {exc}"
    return HEALTHY


async def _check_redis() -> str:
    """Rate-limit storage; the client is closed whether or not the ping succeeds."""
    try:
        async with redis.from_url(settings.redis_url) as client:
            await client.ping()
    except Exception as exc:
        logger.warning("health_check_failed", service="redis", error=str(exc))
        return f"unhealthy: {exc}"
    return HEALTHY


@router.get("/health", response_model=HealthResponse)
async def health_check(db: Database = Depends(get_db)):
    """
    Always 200; status is "degraded" when the database or Redis is down,
    with the failing service named in ``checks``.
    """
    checks = {
        "database": await _check_database(db),
        "redis": await _check_redis(),
    }

    return HealthResponse(
        status=HEALTHY if all(v == HEALTHY for v in checks.values()) else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
