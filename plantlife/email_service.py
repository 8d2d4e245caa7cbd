"""Email service for newsletter contacts and transactional emails via Resend."""

import logging
from typing import Any

import httpx

from plantlife.config import Settings, get_settings

logger = logging.getLogger(__name__)


class EmailServiceError(Exception):
    """The email provider rejected a request or could not be reached."""


class ConfigurationError(EmailServiceError):
    """Required email provider settings are missing."""


class EmailService:
    """Service for the two Resend operations the site uses.

    Each instance is cheap and stateless; a new ``httpx.AsyncClient`` is
    opened per call.
    """

    BASE = "https://api.resend.com"

    def __init__(self, settings: Settings, timeout: float = 10.0):
        """Initialize email service with settings."""
        self.api_key = settings.resend_api_key.strip()
        self.audience_id = settings.resend_audience_id.strip()
        self.from_email = settings.resend_from_email
        self.timeout = timeout

    def is_configured(self) -> bool:
        """Check if Resend has an API key."""
        return bool(self.api_key)

    def validate_config(self, *, needs_audience: bool = False) -> None:
        """
        Check that the settings needed for an operation are present.

        Raises:
            ConfigurationError: If the API key, or the audience ID when
                ``needs_audience`` is set, is missing
        """
        if not self.api_key:
            raise ConfigurationError("EPL_RESEND_API_KEY environment variable is not set")
        if needs_audience and not self.audience_id:
            raise ConfigurationError(
                "EPL_RESEND_AUDIENCE_ID environment variable is not set"
            )

    async def _post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.post(
                    f"{self.BASE}{path}",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=payload,
                )
        except httpx.HTTPError as e:
            raise EmailServiceError(f"HTTP error calling Resend {path}: {e}") from e

    async def create_contact(self, email: str, first_name: str | None = None) -> str | None:
        """
        Add a contact to the newsletter audience.

        Re-adding an address that is already in the audience is not an error.

        Args:
            email: Normalized subscriber email address
            first_name: Optional first name for personalization

        Returns:
            The contact ID, or None when the contact already existed

        Raises:
            ConfigurationError: If the API key or audience ID is missing
            EmailServiceError: If Resend fails
        """
        self.validate_config(needs_audience=True)

        payload: dict[str, Any] = {"email": email, "unsubscribed": False}
        if first_name:
            payload["first_name"] = first_name

        response = await self._post(f"/audiences/{self.audience_id}/contacts", payload)

        if response.status_code == 409:
            logger.info("Newsletter contact already exists")
            return None

        if not response.is_success:
            raise EmailServiceError(
                f"Failed to add contact to newsletter. Status: {response.status_code}, "
                f"Response: {response.text}"
            )

        return response.json().get("id")

    async def send_email(
        self,
        to: str,
        subject: str,
        html: str | None = None,
        text: str | None = None,
        from_email: str | None = None,
        reply_to: str | None = None,
    ) -> str:
        """
        Send a transactional email.

        Args:
            to: Recipient email address
            subject: Email subject
            html: Optional HTML body
            text: Optional plain text body
            from_email: Sender, defaults to the configured address
            reply_to: Optional reply-to address

        Returns:
            The Resend email ID

        Raises:
            ConfigurationError: If the API key is missing
            EmailServiceError: If Resend fails
        """
        self.validate_config()

        data: dict[str, Any] = {
            "from": from_email or self.from_email,
            "to": to,
            "subject": subject,
        }

        if html:
            data["html"] = html
        if text:
            data["text"] = text
        if reply_to:
            data["reply_to"] = reply_to

        response = await self._post("/emails", data)

        if not response.is_success:
            raise EmailServiceError(
                f"Failed to send email. Status: {response.status_code}, "
                f"Response: {response.text}"
            )

        email_id = response.json().get("id", "")
        logger.info(f"Email sent via Resend: {email_id}")
        return email_id


def get_email_service() -> EmailService:
    """FastAPI dependency building an EmailService from current settings."""
    return EmailService(get_settings())
