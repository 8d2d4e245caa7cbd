"""Health check endpoints."""

from fastapi import APIRouter

from plantlife.config import get_settings
from plantlife.email_service import EmailService

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check():
    """Liveness probe."""
    return {"ok": True}


@router.get("/readyz")
async def readiness_check():
    """
    Readiness probe.

    Returns:
        ``ok`` plus whether the email provider has the settings it needs.
        Missing email settings do not make the site unready; the blog and
        static pages still work.
    """
    email_configured = EmailService(get_settings()).is_configured()
    return {"ok": True, "email_configured": email_configured}
