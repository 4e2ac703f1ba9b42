"""
Hybrid in-memory + Redis rate limiting for the public endpoints
(CPF login and appointment booking).

Counts are kept in process memory and synced to Redis every few seconds so
several workers converge on a shared count without a Redis round trip per
request.
"""

import logging
import os
import time
from threading import Lock
from typing import Optional

import redis
from fastapi import HTTPException, Request, status

from . import config

logger = logging.getLogger(__name__)

redis_client: Optional[redis.Redis] = None

# {key: {'count': int, 'reset_time': int, 'last_redis_sync': int}}
memory_cache: dict[str, dict] = {}
cache_lock = Lock()

MEMORY_CACHE_SYNC_INTERVAL = 10  # seconds
MEMORY_CACHE_CLEANUP_INTERVAL = 60  # seconds
last_cleanup_time = 0


def get_redis_client() -> redis.Redis:
    """Get or create the Redis client (REDIS_URL, or REDIS_HOST/REDIS_PORT/...)"""
    global redis_client

    if redis_client is None:
        redis_url = os.getenv("REDIS_URL")
        common = {
            "decode_responses": True,
            "socket_connect_timeout": 5,
            "socket_timeout": 5,
            "retry_on_timeout": True,
            "health_check_interval": 30,
            "max_connections": 20,
        }

        try:
            if redis_url:
                logger.info("📡 Connecting to Redis via REDIS_URL")
                client = redis.from_url(redis_url, **common)
            else:
                redis_host = os.getenv("REDIS_HOST", "localhost")
                redis_port = int(os.getenv("REDIS_PORT", "6379"))
                logger.info(f"📡 Connecting to Redis at {redis_host}:{redis_port}")
                client = redis.Redis(
                    host=redis_host,
                    port=redis_port,
                    password=os.getenv("REDIS_PASSWORD"),
                    db=int(os.getenv("REDIS_DB", "0")),
                    ssl=os.getenv("REDIS_SSL", "false").lower() == "true",
                    **common,
                )
            client.ping()
        except Exception as e:
            logger.error(f"❌ Failed to connect to Redis: {str(e)}")
            raise

        redis_client = client
        logger.info("Redis connected successfully")

    return redis_client


def cleanup_expired_cache():
    """Remove expired entries from memory cache"""
    global last_cleanup_time
    current_time = int(time.time())

    if current_time - last_cleanup_time < MEMORY_CACHE_CLEANUP_INTERVAL:
        return

    with cache_lock:
        expired_keys = [
            k for k, v in memory_cache.items() if current_time >= v.get("reset_time", 0)
        ]
        for k in expired_keys:
            del memory_cache[k]

        if expired_keys:
            logger.debug(f"🧹 Cleaned up {len(expired_keys)} expired rate limit entries")

    last_cleanup_time = current_time


def check_rate_limit(
    key: str, limit: int, window_seconds: int, client: redis.Redis
) -> tuple[bool, int, int]:
    """Count one request against ``key``.

    Returns:
        Tuple of (is_allowed, current_count, ttl_seconds)
    """
    try:
        current_time = int(time.time())
        cleanup_expired_cache()

        with cache_lock:
            if key not in memory_cache:
                # Resume the window another worker may have started
                entry = {
                    "count": 0,
                    "reset_time": current_time + window_seconds,
                    "last_redis_sync": current_time,
                }
                try:
                    redis_count = client.get(key)
                    redis_ttl = client.ttl(key)
                    if redis_count and redis_ttl > 0:
                        entry["count"] = int(redis_count)
                        entry["reset_time"] = current_time + redis_ttl
                except Exception as e:
                    logger.warning(f"⚠️ Failed to load from Redis, using memory only: {e}")
                memory_cache[key] = entry

            cache_entry = memory_cache[key]

            if current_time >= cache_entry["reset_time"]:
                cache_entry["count"] = 0
                cache_entry["reset_time"] = current_time + window_seconds
                cache_entry["last_redis_sync"] = 0

            is_allowed = cache_entry["count"] < limit
            if is_allowed:
                cache_entry["count"] += 1

            if current_time - cache_entry.get("last_redis_sync", 0) >= MEMORY_CACHE_SYNC_INTERVAL:
                try:
                    client.set(key, cache_entry["count"], ex=window_seconds)
                    cache_entry["last_redis_sync"] = current_time
                except Exception as e:
                    logger.warning(f"⚠️ Failed to sync to Redis: {e}")

            ttl = cache_entry["reset_time"] - current_time
            return is_allowed, cache_entry["count"], max(0, ttl)

    except Exception as e:
        logger.error(f"❌ Rate limit check failed: {str(e)}")
        logger.warning("🔒 Denying request due to rate limiting error (fail-closed mode)")
        return False, limit, 0


async def rate_limit_dependency(
    request: Request,
    limit: int,
    window_seconds: int,
    key_prefix: str = "rate_limit",
    use_ip: bool = True,
):
    """FastAPI dependency body: per-IP (or global) fixed-window rate limit"""
    if not config.RATE_LIMIT_ENABLED:
        return

    try:
        client = get_redis_client()

        if use_ip:
            client_ip = request.client.host if request.client else "unknown"
            forwarded = request.headers.get("X-Forwarded-For")
            if forwarded:
                client_ip = forwarded.split(",")[0].strip()
            key = f"{key_prefix}:{client_ip}"
        else:
            key = f"{key_prefix}:global"

        is_allowed, current_count, ttl = check_rate_limit(key, limit, window_seconds, client)

        if not is_allowed:
            logger.warning(
                f"🚫 Rate limit EXCEEDED for {key} - {current_count}/{limit} requests used"
            )
            raise HTTPException(
                status_code=429,
                detail={
                    "message": f"Muitas tentativas. Máximo de {limit} requisições a cada {window_seconds} segundos.",
                    "retry_after": ttl,
                },
                headers={"Retry-After": str(ttl)},
            )

        request.state.rate_limit_remaining = limit - current_count

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Rate limiting error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Rate limiting service temporarily unavailable",
        ) from e


def create_rate_limiter(
    limit: int, window_seconds: int, key_prefix: str = "rate_limit", use_ip: bool = True
):
    """
    Create a rate limiter dependency with specific parameters

    Example usage:
        login_rate_limit = create_rate_limiter(limit=10, window_seconds=60, key_prefix="client_login")

        @router.post("/login")
        async def login(data: ClientLogin, _: None = Depends(login_rate_limit)):
            ...
    """

    async def rate_limiter(request: Request):
        return await rate_limit_dependency(request, limit, window_seconds, key_prefix, use_ip)

    return rate_limiter
