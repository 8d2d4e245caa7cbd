"""FastAPI dependencies for API routers."""

from collections.abc import AsyncGenerator

from redis.asyncio import Redis

from plantlife.config import get_settings

_redis_client: Redis | None = None


async def get_redis() -> AsyncGenerator[Redis | None, None]:
    """Dependency yielding the shared async Redis client.

    Yields None when the blog feed cache is disabled, so no client is ever
    created in that case.
    """
    global _redis_client

    settings = get_settings()
    if not settings.feed_cache_enabled:
        yield None
        return

    if _redis_client is None:
        _redis_client = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=False,
        )

    yield _redis_client
