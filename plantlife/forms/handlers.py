"""Newsletter signup and contact form handlers.

Both handlers take the raw request body plus an email service and return a
FormResult. Validation problems become precise 400 responses; anything that
goes wrong with the provider becomes one generic 500 so vendor details never
reach the client.
"""

import logging

from plantlife.email_service import EmailService

from .messages import (
    build_contact_html,
    build_contact_text,
    contact_subject,
)
from .models import ContactRequest, FormResult, SubscriptionRequest
from .validation import (
    ValidationError,
    clean_string,
    parse_body,
    require_string,
    validate_email,
)

logger = logging.getLogger(__name__)

SUBSCRIBE_SUCCESS = "Successfully subscribed to the newsletter"
SUBSCRIBE_FAILURE = "Unable to subscribe. Please try again later."
CONTACT_SUCCESS = "Thank you for your message. We will get back to you soon."
CONTACT_FAILURE = "Unable to send your message. Please try again later."


def _error(status_code: int, message: str) -> FormResult:
    return FormResult(status_code=status_code, body={"success": False, "error": message})


def _ok(message: str) -> FormResult:
    return FormResult(status_code=200, body={"success": True, "message": message})


def validate_subscription(raw_body: bytes | str) -> SubscriptionRequest:
    """
    Validate a newsletter signup body.

    Raises:
        ValidationError: With the message to return to the client
    """
    body = parse_body(raw_body)
    email = validate_email(body.get("email"))
    return SubscriptionRequest(email=email, first_name=clean_string(body.get("firstName")))


def validate_contact(body: dict) -> ContactRequest:
    """
    Validate a contact form body that already passed the honeypot check.

    Raises:
        ValidationError: With the message to return to the client
    """
    name = require_string(body.get("name"), "Name")
    email = validate_email(body.get("email"))
    message = require_string(body.get("message"), "Message")
    return ContactRequest(name=name, email=email, message=message)


def is_bot_submission(body: dict) -> bool:
    """True when the hidden honeypot field was filled in."""
    return clean_string(body.get("website")) is not None


async def handle_subscribe(raw_body: bytes | str, email_service: EmailService) -> FormResult:
    """
    Handle a newsletter signup.

    Args:
        raw_body: Raw JSON request body
        email_service: Provider used to add the contact

    Returns:
        200 on success, 400 on invalid input, 500 on provider failure
    """
    try:
        signup = validate_subscription(raw_body)
    except ValidationError as e:
        return _error(400, str(e))

    try:
        await email_service.create_contact(signup.email, first_name=signup.first_name)
    except Exception:
        logger.error(
            "Newsletter signup failed", exc_info=True, extra={"handler": "newsletter"}
        )
        return _error(500, SUBSCRIBE_FAILURE)

    return _ok(SUBSCRIBE_SUCCESS)


async def handle_contact(
    raw_body: bytes | str, email_service: EmailService, *, recipient: str
) -> FormResult:
    """
    Handle a contact form submission.

    A filled honeypot gets the normal success response without anything
    being sent, so bots cannot tell they were caught.

    Args:
        raw_body: Raw JSON request body
        email_service: Provider used to send the message
        recipient: Address that receives contact messages

    Returns:
        200 on success (or honeypot), 400 on invalid input, 500 on provider failure
    """
    try:
        body = parse_body(raw_body)
    except ValidationError as e:
        return _error(400, str(e))

    if is_bot_submission(body):
        logger.warning("Contact form honeypot triggered", extra={"handler": "contact"})
        return _ok(CONTACT_SUCCESS)

    try:
        contact = validate_contact(body)
    except ValidationError as e:
        return _error(400, str(e))

    try:
        await email_service.send_email(
            to=recipient,
            subject=contact_subject(contact.name),
            html=build_contact_html(contact.name, contact.email, contact.message),
            text=build_contact_text(contact.name, contact.email, contact.message),
            reply_to=contact.email,
        )
    except Exception:
        logger.error("Contact form send failed", exc_info=True, extra={"handler": "contact"})
        return _error(500, CONTACT_FAILURE)

    return _ok(CONTACT_SUCCESS)
