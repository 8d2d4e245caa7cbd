"""Tests for the application factory."""

import pytest
from httpx import ASGITransport, AsyncClient

from main import create_app


@pytest.mark.asyncio
async def test_security_headers_present():
    app = create_app()
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/healthz")

    assert response.status_code == 200
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "frame-ancestors 'none'" in response.headers["Content-Security-Policy"]
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


def test_routes_registered():
    app = create_app()
    paths = {getattr(route, "path", None) for route in app.routes}

    assert {
        "/healthz",
        "/readyz",
        "/robots.txt",
        "/sitemap.xml",
        "/api/blog",
        "/api/newsletter",
        "/api/contact",
    } <= paths


def test_rate_limiter_attached():
    app = create_app()
    assert app.state.limiter is not None
