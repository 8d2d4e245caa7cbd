"""Tests for the optional Redis cache around the blog feed fetch."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError

from plantlife.blog.cache import fetch_posts_cached
from plantlife.blog.feed import FetchError
from plantlife.blog.models import PostSummary


def _post(post_id: str) -> PostSummary:
    return PostSummary(
        id=post_id,
        title=f"Post {post_id}",
        excerpt="Excerpt",
        url=f"https://medium.com/@easyplantlife/{post_id}",
        published_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        categories=["plants"],
    )


@pytest.fixture
def mock_redis():
    """Create a mock Redis client."""
    redis = AsyncMock(spec=Redis)
    redis.get = AsyncMock(return_value=None)
    redis.setex = AsyncMock()
    return redis


@pytest.mark.asyncio
async def test_cache_hit_skips_fetch(mock_redis):
    cached = [_post("abc").model_dump(mode="json")]
    mock_redis.get.return_value = json.dumps(cached)
    fetcher = AsyncMock()

    posts = await fetch_posts_cached(
        mock_redis, "easyplantlife", 10, ttl_seconds=600, fetcher=fetcher
    )

    fetcher.assert_not_called()
    mock_redis.get.assert_called_once_with("epl:blog:@easyplantlife:10")
    assert posts == [_post("abc")]


@pytest.mark.asyncio
async def test_cache_miss_fetches_and_stores_with_splayed_ttl(mock_redis):
    fetcher = AsyncMock(return_value=[_post("a"), _post("b")])

    posts = await fetch_posts_cached(
        mock_redis,
        "@EasyPlantLife",
        5,
        ttl_seconds=600,
        splay_max=60,
        fetcher=fetcher,
        timeout=3.0,
    )

    fetcher.assert_called_once_with("@EasyPlantLife", 5, timeout=3.0)
    assert [p.id for p in posts] == ["a", "b"]

    key, ttl, payload = mock_redis.setex.call_args[0]
    assert key == "epl:blog:@easyplantlife:5"
    assert 600 <= ttl <= 660
    assert [item["id"] for item in json.loads(payload)] == ["a", "b"]


@pytest.mark.asyncio
async def test_cache_key_includes_max_posts(mock_redis):
    fetcher = AsyncMock(return_value=[])

    await fetch_posts_cached(mock_redis, "easyplantlife", 3, ttl_seconds=60, fetcher=fetcher)

    mock_redis.get.assert_called_once_with("epl:blog:@easyplantlife:3")


@pytest.mark.asyncio
async def test_fetch_errors_propagate_and_are_not_cached(mock_redis):
    fetcher = AsyncMock(side_effect=FetchError("boom", status_code=503))

    with pytest.raises(FetchError):
        await fetch_posts_cached(mock_redis, "easyplantlife", ttl_seconds=60, fetcher=fetcher)

    mock_redis.setex.assert_not_called()


@pytest.mark.asyncio
async def test_redis_outage_falls_back_to_fetch(mock_redis):
    mock_redis.get.side_effect = RedisConnectionError("connection refused")
    mock_redis.setex.side_effect = RedisConnectionError("connection refused")
    fetcher = AsyncMock(return_value=[_post("a")])

    posts = await fetch_posts_cached(mock_redis, "easyplantlife", ttl_seconds=60, fetcher=fetcher)

    assert [p.id for p in posts] == ["a"]
    fetcher.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "cached_value",
    [
        b"{not json",
        json.dumps([{"id": "old-schema-without-required-fields"}]),
        json.dumps({"posts": []}),
        json.dumps(5),
    ],
)
async def test_unreadable_cache_entry_is_treated_as_miss(mock_redis, cached_value):
    mock_redis.get.return_value = cached_value
    fetcher = AsyncMock(return_value=[_post("fresh")])

    posts = await fetch_posts_cached(mock_redis, "easyplantlife", ttl_seconds=60, fetcher=fetcher)

    assert [p.id for p in posts] == ["fresh"]
    fetcher.assert_called_once()
    key, _, payload = mock_redis.setex.call_args[0]
    assert key == "epl:blog:@easyplantlife:10"
    assert json.loads(payload)[0]["id"] == "fresh"
