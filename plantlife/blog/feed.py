"""Medium RSS feed fetching and normalization."""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx

from .models import PostSummary
from .sanitize import extract_id_from_guid, sanitize_excerpt

logger = logging.getLogger(__name__)

FEED_ACCEPT = "application/rss+xml, application/xml, text/xml"

# XML namespaces used by Medium RSS feeds
NAMESPACES = {
    "media": "http://search.yahoo.com/mrss/",
}


class FeedError(Exception):
    """Base class for blog feed failures."""


class FetchError(FeedError):
    """The feed could not be retrieved.

    ``status_code`` is set when the provider answered with a non-2xx status
    and is None for transport failures (DNS, connection, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(FeedError):
    """The feed body is not well-formed XML."""


def normalize_handle(account_handle: str) -> str:
    """Ensure the account handle carries the leading "@" Medium expects."""
    handle = account_handle.strip()
    return handle if handle.startswith("@") else f"@{handle}"


def build_feed_url(account_handle: str, host: str = "medium.com") -> str:
    """Build the RSS feed URL for an account."""
    return f"https://{host}/feed/{normalize_handle(account_handle)}"


def parse_pub_date(value: str) -> datetime | None:
    """Parse an RSS pubDate (RFC 2822) or ISO 8601 timestamp.

    Naive values are assumed to be UTC. Returns None when unparseable.
    """
    try:
        published = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        try:
            published = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None

    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    return published


def _text(item: ET.Element, tag: str) -> str:
    elem = item.find(tag)
    if elem is None or elem.text is None:
        return ""
    return elem.text.strip()


def parse_item(item: ET.Element) -> PostSummary | None:
    """Build a PostSummary from an RSS <item>.

    Returns None when a required field is missing, the date is unparseable
    or the description has no readable text.
    """
    title = _text(item, "title")
    link = _text(item, "link")
    guid = _text(item, "guid")
    pub_date = _text(item, "pubDate")
    description = _text(item, "description")

    if not title or not link or not guid or not pub_date or not description:
        return None

    published_at = parse_pub_date(pub_date)
    if published_at is None:
        return None

    excerpt = sanitize_excerpt(description)
    if not excerpt:
        return None

    categories = [
        elem.text.strip()
        for elem in item.findall("category")
        if elem.text and elem.text.strip()
    ]

    thumbnail_url = None
    thumbnail = item.find("media:thumbnail", NAMESPACES)
    if thumbnail is not None and thumbnail.attrib.get("url", "").strip():
        thumbnail_url = thumbnail.attrib["url"].strip()

    return PostSummary(
        id=extract_id_from_guid(guid),
        title=title,
        excerpt=excerpt,
        url=link,
        published_at=published_at,
        categories=categories or None,
        thumbnail_url=thumbnail_url,
    )


def parse_feed(xml_text: str, max_posts: int = 10) -> list[PostSummary]:
    """Parse an RSS document into at most ``max_posts`` summaries.

    Items are read in document order and parsing stops as soon as
    ``max_posts`` valid summaries exist.

    Raises:
        ParseError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ParseError("Failed to parse Medium RSS feed: Invalid XML") from e

    channel = root.find("channel")
    if channel is None:
        return []

    posts: list[PostSummary] = []
    skipped = 0
    for item in channel.iterfind("item"):
        if len(posts) >= max_posts:
            break

        post = parse_item(item)
        if post is None:
            skipped += 1
            continue
        posts.append(post)

    if skipped:
        logger.debug(f"Skipped {skipped} incomplete feed item(s)")

    return posts


async def fetch_posts(
    account_handle: str,
    max_posts: int = 10,
    *,
    host: str = "medium.com",
    timeout: float = 10.0,
) -> list[PostSummary]:
    """
    Fetch blog posts from a Medium account's RSS feed.

    Makes a single GET request, parses the XML and returns up to
    ``max_posts`` PostSummary objects in feed order. Items that are missing
    required fields are dropped silently.

    Args:
        account_handle: Medium username, with or without the "@" prefix
        max_posts: Upper bound on returned posts (positive integer)
        host: Feed provider host
        timeout: Request timeout in seconds

    Returns:
        List of PostSummary objects, possibly empty

    Raises:
        ValueError: If max_posts is not a positive integer
        FetchError: On transport failure or a non-2xx response
        ParseError: If the response body is not well-formed XML
    """
    if isinstance(max_posts, bool) or not isinstance(max_posts, int) or max_posts < 1:
        raise ValueError("max_posts must be a positive integer")

    url = build_feed_url(account_handle, host)
    logger.info(f"Fetching blog feed {url}", extra={"feed_url": url})

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url, headers={"Accept": FEED_ACCEPT})
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch Medium posts: {e}") from e

    if not response.is_success:
        raise FetchError(
            f"Failed to fetch Medium RSS feed: {response.status_code} "
            f"{response.reason_phrase}",
            status_code=response.status_code,
        )

    posts = parse_feed(response.text, max_posts)
    logger.info(
        f"Loaded {len(posts)} post(s) from {url}",
        extra={"feed_url": url, "post_count": len(posts)},
    )
    return posts
