"""Text helpers for turning feed markup into plain display text."""

import re

TAG_PATTERN = re.compile(r"<[^>]*>")
ENTITY_PATTERN = re.compile(r"&[a-zA-Z0-9#]+;")
GUID_ID_PATTERN = re.compile(r"/p/([a-zA-Z0-9]+)$")

# Only these entities are decoded; anything else is left untouched
HTML_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
    "&nbsp;": " ",
    "&mdash;": "—",
    "&ndash;": "–",
    "&hellip;": "…",
}


def strip_html(html: str) -> str:
    """Remove every markup tag from a string."""
    return TAG_PATTERN.sub("", html)


def decode_html_entities(text: str) -> str:
    """Decode the common HTML entities listed in HTML_ENTITIES."""
    return ENTITY_PATTERN.sub(lambda m: HTML_ENTITIES.get(m.group(0), m.group(0)), text)


def sanitize_excerpt(description: str) -> str:
    """Strip tags, decode entities and trim a feed item description.

    Returns an empty string when nothing readable is left.
    """
    return decode_html_entities(strip_html(description)).strip()


def extract_id_from_guid(guid: str) -> str:
    """Extract the post ID from a Medium guid URL.

    Example: "https://medium.com/p/abc123" -> "abc123". A guid that does not
    end in ``/p/<id>`` is returned unchanged.
    """
    match = GUID_ID_PATTERN.search(guid)
    return match.group(1) if match else guid
