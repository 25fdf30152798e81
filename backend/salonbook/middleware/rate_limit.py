# backend/salonbook/middleware/rate_limit.py
"""
Rate limiting for public availability endpoints.

Fixed window per client IP and path, one MULTI/EXEC round trip:
    SET rl:{ip}:{path} 0 EX window NX   (opens the window on first hit)
    INCR rl:{ip}:{path}
    TTL  rl:{ip}:{path}                 (seconds until the window resets)

RATE_LIMIT_REQUESTS=0 disables the check. Redis failures fail open.
"""

import logging
from typing import Optional

from fastapi import Request
from redis.exceptions import RedisError

from ..config import settings
from ..errors import RateLimitError
from ..redis_client import redis_client

logger = logging.getLogger(__name__)

KEY_PREFIX = "rl"


def client_ip(request: Request) -> str:
    headers = request.headers
    forwarded = headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return (
        headers.get("X-Real-IP")
        or (request.client.host if request.client else None)
        or "unknown"
    )


def check_rate_limit(ip: str, path: str) -> Optional[int]:
    """
    Count one request for (ip, path).

    Returns None while the window has room, otherwise the seconds the
    client should wait.
    """
    limit = settings.rate_limit_requests
    window = settings.rate_limit_window_seconds
    if limit <= 0:
        return None

    key = f"{KEY_PREFIX}:{ip}:{path}"
    try:
        pipe = redis_client.pipeline()
        pipe.set(key, 0, ex=window, nx=True)
        pipe.incr(key)
        pipe.ttl(key)
        _, count, ttl = pipe.execute()
    except RedisError as e:
        logger.error(f"Rate limit check failed for {key}: {e}")
        return None

    if count <= limit:
        return None
    return ttl if ttl > 0 else window


def rate_limit(request: Request) -> None:
    """FastAPI dependency: raises RateLimitError (429) once the window is used up."""
    ip = client_ip(request)
    retry_after = check_rate_limit(ip, request.url.path)
    if retry_after is not None:
        logger.warning(f"Rate limit exceeded: ip={ip} path={request.url.path}")
        raise RateLimitError(retry_after=retry_after)
