"""Pydantic models for blog post summaries."""

from datetime import datetime

from pydantic import BaseModel


class PostSummary(BaseModel):
    """A validated, display-ready post taken from the Medium RSS feed."""

    id: str
    title: str
    excerpt: str
    url: str
    published_at: datetime
    categories: list[str] | None = None
    thumbnail_url: str | None = None
