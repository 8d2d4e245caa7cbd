"""Pydantic models for validated form submissions."""

from pydantic import BaseModel


class SubscriptionRequest(BaseModel):
    """A newsletter signup after validation and normalization."""

    email: str
    first_name: str | None = None


class ContactRequest(BaseModel):
    """A contact form submission after validation and normalization."""

    name: str
    email: str
    message: str


class FormResult(BaseModel):
    """Status code and JSON body a form handler answers with."""

    status_code: int
    body: dict
