"""Form submission handlers for the Easy Plant Life site."""

from .handlers import handle_contact, handle_subscribe
from .models import ContactRequest, FormResult, SubscriptionRequest
from .validation import ValidationError

__all__ = [
    "ContactRequest",
    "FormResult",
    "SubscriptionRequest",
    "ValidationError",
    "handle_contact",
    "handle_subscribe",
]
