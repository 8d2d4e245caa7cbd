"""Blog feed ingestion for the Easy Plant Life site."""

from .cache import fetch_posts_cached
from .feed import FeedError, FetchError, ParseError, fetch_posts, parse_feed
from .models import PostSummary

__all__ = [
    "FeedError",
    "FetchError",
    "ParseError",
    "PostSummary",
    "fetch_posts",
    "fetch_posts_cached",
    "parse_feed",
]
