"""Blog listing endpoint backed by the Medium RSS feed."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from redis.asyncio import Redis
from slowapi import Limiter
from slowapi.util import get_remote_address

from plantlife.api.dependencies import get_redis
from plantlife.blog import FeedError, fetch_posts, fetch_posts_cached
from plantlife.config import get_settings

logger = logging.getLogger(__name__)

BLOG_UNAVAILABLE = "Unable to load blog posts. Please try again later."

router = APIRouter(prefix="/api/blog", tags=["blog"])
limiter = Limiter(key_func=get_remote_address)


@router.get("")
@limiter.limit("60/minute")
async def list_posts(
    request: Request,
    limit: int | None = Query(
        default=None, ge=1, le=50, description="Maximum posts to return (1-50)"
    ),
    redis: Redis | None = Depends(get_redis),
):
    """
    List recent blog posts.

    A feed failure never fails the request: the response then carries an
    empty ``posts`` list and a user-facing ``error`` message.

    Query Parameters:
        - limit: Maximum posts (defaults to the configured feed_max_posts)

    Returns:
        JSON response with:
            - posts: List of post summaries in feed order
            - error: null, or a message when the feed could not be loaded
    """
    settings = get_settings()
    max_posts = limit or settings.feed_max_posts
    fetch_kwargs = {
        "host": settings.feed_host,
        "timeout": settings.feed_timeout_seconds,
    }

    try:
        if redis is not None:
            posts = await fetch_posts_cached(
                redis,
                settings.medium_username,
                max_posts,
                ttl_seconds=settings.feed_cache_ttl_seconds,
                splay_max=settings.feed_cache_splay_max,
                **fetch_kwargs,
            )
        else:
            posts = await fetch_posts(settings.medium_username, max_posts, **fetch_kwargs)
    except FeedError:
        logger.error("Failed to load blog feed", exc_info=True)
        return {"posts": [], "error": BLOG_UNAVAILABLE}

    return {
        "posts": [post.model_dump(mode="json", exclude_none=True) for post in posts],
        "error": None,
    }
