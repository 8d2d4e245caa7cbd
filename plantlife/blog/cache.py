"""Optional Redis cache in front of the blog feed fetch."""

import json
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from .feed import fetch_posts, normalize_handle
from .models import PostSummary

logger = logging.getLogger(__name__)

Fetcher = Callable[..., Awaitable[list[PostSummary]]]


def _key(account_handle: str, max_posts: int) -> str:
    """Generate Redis key for a feed listing."""
    return f"epl:blog:{normalize_handle(account_handle).lower()}:{max_posts}"


async def fetch_posts_cached(
    redis: Redis,
    account_handle: str,
    max_posts: int = 10,
    *,
    ttl_seconds: int,
    splay_max: int = 0,
    fetcher: Fetcher | None = None,
    **fetch_kwargs: Any,
) -> list[PostSummary]:
    """
    Return cached posts for ``(account_handle, max_posts)`` or fetch them.

    On a cache miss the wrapped fetcher is called and its result is stored
    with TTL + randomized splay. Fetch errors propagate and nothing is cached.
    An unavailable Redis or an unreadable cache entry only costs the cache:
    the fetch still happens.

    Args:
        redis: Async Redis client
        account_handle: Medium username
        max_posts: Upper bound on returned posts
        ttl_seconds: Base cache lifetime
        splay_max: Upper bound of the random extra lifetime
        fetcher: Fetch function being wrapped, fetch_posts by default
        **fetch_kwargs: Passed through to the fetcher

    Returns:
        List of PostSummary objects
    """
    key = _key(account_handle, max_posts)

    try:
        cached_data = await redis.get(key)
    except RedisError:
        logger.warning(f"Blog feed cache read failed for {key}", exc_info=True)
        cached_data = None

    if cached_data:
        try:
            return [PostSummary(**item) for item in json.loads(cached_data)]
        except (ValueError, TypeError):
            # ValidationError is a ValueError; stale or corrupt entries are misses
            logger.warning(f"Discarding unreadable blog feed cache entry {key}", exc_info=True)

    fetcher = fetcher or fetch_posts
    posts = await fetcher(account_handle, max_posts, **fetch_kwargs)

    ttl = ttl_seconds + random.randint(0, splay_max)
    serialized = [post.model_dump(mode="json") for post in posts]
    try:
        await redis.setex(key, ttl, json.dumps(serialized))
    except RedisError:
        logger.warning(f"Blog feed cache write failed for {key}", exc_info=True)

    return posts
