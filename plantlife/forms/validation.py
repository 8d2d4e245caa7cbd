"""Input validation helpers shared by the form handlers."""

import json
import re
from typing import Any

# Basic email format: local@domain.tld, no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationError(Exception):
    """A submission failed validation; the message is safe to show users."""


def parse_body(raw_body: bytes | str) -> dict[str, Any]:
    """
    Decode a JSON request body.

    Raises:
        ValidationError: If the body is not a JSON object
    """
    try:
        body = json.loads(raw_body)
    except ValueError:
        raise ValidationError("Invalid request body")

    if not isinstance(body, dict):
        raise ValidationError("Invalid request body")
    return body


def clean_string(value: Any) -> str | None:
    """Return the trimmed string, or None if it is not a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def validate_email(value: Any) -> str:
    """
    Trim, lower-case and check an email address.

    Raises:
        ValidationError: "Email is required" or "Invalid email format"
    """
    email = clean_string(value)
    if email is None:
        raise ValidationError("Email is required")

    email = email.lower()
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format")
    return email


def require_string(value: Any, label: str) -> str:
    """
    Return a trimmed required field.

    Raises:
        ValidationError: "<label> is required"
    """
    cleaned = clean_string(value)
    if cleaned is None:
        raise ValidationError(f"{label} is required")
    return cleaned
