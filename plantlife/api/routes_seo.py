"""robots.txt and sitemap.xml."""

import xml.etree.ElementTree as ET
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from plantlife.config import get_settings

router = APIRouter(tags=["seo"])

# (path, change frequency, priority)
SITEMAP_PAGES = [
    ("", "monthly", 1.0),
    ("/about", "monthly", 0.8),
    ("/books", "monthly", 0.8),
    ("/blog", "weekly", 0.8),
    ("/newsletter", "monthly", 0.6),
    ("/contact", "yearly", 0.5),
]

DISALLOWED_PATHS = ["/dev/", "/api/"]

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_robots_txt(base_url: str) -> str:
    lines = ["User-agent: *", "Allow: /"]
    lines += [f"Disallow: {path}" for path in DISALLOWED_PATHS]
    lines += ["", f"Sitemap: {base_url}/sitemap.xml"]
    return "\n".join(lines) + "\n"


def build_sitemap_xml(base_url: str, last_modified: datetime) -> str:
    """Render the sitemap for the public pages."""
    lastmod = last_modified.isoformat()
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for path, changefreq, priority in SITEMAP_PAGES:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = base_url + path
        ET.SubElement(url, "lastmod").text = lastmod
        ET.SubElement(url, "changefreq").text = changefreq
        ET.SubElement(url, "priority").text = str(priority)

    ET.indent(urlset, space="  ")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        + ET.tostring(urlset, encoding="unicode")
        + "\n"
    )


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt():
    return build_robots_txt(get_settings().site_url.rstrip("/"))


@router.get("/sitemap.xml")
async def sitemap_xml():
    base_url = get_settings().site_url.rstrip("/")
    body = build_sitemap_xml(base_url, datetime.now(UTC))
    return Response(content=body, media_type="application/xml")
