"""Newsletter signup and contact form endpoints."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from plantlife.config import get_settings
from plantlife.email_service import EmailService, get_email_service
from plantlife.forms import FormResult, handle_contact, handle_subscribe

router = APIRouter(prefix="/api", tags=["forms"])
limiter = Limiter(key_func=get_remote_address)


def _respond(result: FormResult) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.post("/newsletter")
@limiter.limit("10/minute")
async def subscribe(
    request: Request,
    email_service: EmailService = Depends(get_email_service),
):
    """
    Newsletter signup.

    Body: ``{"email": str, "firstName"?: str}``

    Returns:
        ``{"success": true, "message": ...}`` or ``{"success": false, "error": ...}``
        with status 400 (bad input) or 500 (provider failure).
    """
    raw_body = await request.body()
    return _respond(await handle_subscribe(raw_body, email_service))


@router.post("/contact")
@limiter.limit("5/minute")
async def contact(
    request: Request,
    email_service: EmailService = Depends(get_email_service),
):
    """
    Contact form submission.

    Body: ``{"name": str, "email": str, "message": str, "website"?: str}``
    where ``website`` is the hidden honeypot field.
    """
    settings = get_settings()
    raw_body = await request.body()
    result = await handle_contact(raw_body, email_service, recipient=settings.contact_email)
    return _respond(result)
