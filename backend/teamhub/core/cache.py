"""Redis cache configuration and utilities."""
import inspect
import json
from functools import wraps
from typing import Any, Optional

import redis

from teamhub.core.logging import get_logger

logger = get_logger(__name__)

redis_client: Optional[redis.Redis] = None
default_expire: int = 3600

# Arguments that identify the caller rather than the lookup
_SKIPPED_ARGS = {"self", "store"}


def configure_cache(redis_url: Optional[str], ttl: int = 3600) -> Optional[redis.Redis]:
    """Connect to Redis, leaving caching disabled when unset or unreachable.

    ``ttl`` becomes the lifetime of entries cached without an explicit ``expire``.
    """
    global redis_client, default_expire
    default_expire = ttl
    if not redis_url:
        redis_client = None
        logger.info("cache_disabled", reason="REDIS_URL not set")
        return None
    try:
        client = redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        client.ping()
    except (redis.ConnectionError, redis.TimeoutError) as e:
        logger.warning("cache_disabled", reason=str(e))
        redis_client = None
        return None
    logger.info("cache_connected", url=redis_url)
    redis_client = client
    return client


def close_cache() -> None:
    global redis_client
    if redis_client is not None:
        redis_client.close()
    redis_client = None


def get_cache_key(prefix: str, **kwargs) -> str:
    """Generate a cache key from prefix and kwargs."""
    key_parts = [prefix]
    for k, v in sorted(kwargs.items()):
        if v is not None:
            key_parts.append(f"{k}:{v}")
    return ":".join(key_parts)


def cache_result(expire: Optional[int] = None, key_prefix: str = "cache"):
    """Decorator to cache JSON-serializable function results in Redis.

    Exceptions raised by the wrapped function are never cached.

    Args:
        expire: Cache expiration time in seconds; ``None`` uses the configured TTL
        key_prefix: Prefix for cache keys
    """
    def decorator(func):
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            if redis_client is None:
                return func(*args, **kwargs)

            bound = signature.bind(*args, **kwargs)
            cache_kwargs = {
                name: value
                for name, value in bound.arguments.items()
                if name not in _SKIPPED_ARGS
            }
            cache_key = get_cache_key(key_prefix, func_name=func.__name__, **cache_kwargs)

            cached_value = get_from_cache(cache_key)
            if cached_value is not None:
                logger.debug("cache_hit", key=cache_key)
                return cached_value

            result = func(*args, **kwargs)
            ttl = expire if expire is not None else default_expire
            if set_in_cache(cache_key, result, expire=ttl):
                logger.debug("cache_set", key=cache_key)
            return result

        return wrapper
    return decorator


def get_from_cache(key: str) -> Optional[Any]:
    """Get a value from cache."""
    if redis_client is None:
        return None
    try:
        value = redis_client.get(key)
        if value is not None:
            return json.loads(value)
        return None
    except redis.RedisError as e:
        logger.warning("cache_get_failed", key=key, error=str(e))
        return None


def set_in_cache(key: str, value: Any, expire: int = 3600) -> bool:
    """Set a value in cache."""
    if redis_client is None:
        return False
    try:
        redis_client.setex(key, expire, json.dumps(value, default=str))
        return True
    except redis.RedisError as e:
        logger.warning("cache_set_failed", key=key, error=str(e))
        return False


def clear_cache_pattern(pattern: str) -> int:
    """Clear all cache keys matching a pattern."""
    if redis_client is None:
        return 0
    try:
        keys = redis_client.keys(pattern)
        if keys:
            return redis_client.delete(*keys)
        return 0
    except redis.RedisError as e:
        logger.warning("cache_clear_failed", pattern=pattern, error=str(e))
        return 0
