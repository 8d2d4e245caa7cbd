"""Email bodies for contact form submissions."""

from html import escape


def contact_subject(name: str) -> str:
    return f"Contact Form: {name}"


def build_contact_html(name: str, email: str, message: str) -> str:
    """
    Build the HTML email for a contact form submission.

    Every user-supplied value is HTML-escaped.
    """
    name_html = escape(name)
    email_html = escape(email)
    message_html = escape(message)

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Contact Form Submission</title>
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <h2 style="color: #2d5016; margin-bottom: 24px;">New Contact Form Submission</h2>

    <table style="width: 100%; border-collapse: collapse;">
        <tr>
            <td style="padding: 8px 0; font-weight: bold; width: 80px;">Name:</td>
            <td style="padding: 8px 0;">{name_html}</td>
        </tr>
        <tr>
            <td style="padding: 8px 0; font-weight: bold;">Email:</td>
            <td style="padding: 8px 0;"><a href="mailto:{email_html}" style="color: #2d5016;">{email_html}</a></td>
        </tr>
    </table>

    <h3 style="color: #2d5016; margin-top: 24px; margin-bottom: 12px;">Message:</h3>
    <div style="background-color: #f9f9f7; padding: 16px; border-radius: 8px; white-space: pre-wrap;">{message_html}</div>

    <hr style="border: none; border-top: 1px solid #e5e5e5; margin: 32px 0;">
    <p style="font-size: 12px; color: #666;">This email was sent from the Easy Plant Life contact form.</p>
</body>
</html>
"""


def build_contact_text(name: str, email: str, message: str) -> str:
    """Build the plain text fallback for a contact form submission."""
    return f"""New Contact Form Submission
============================

Name: {name}
Email: {email}

Message:
--------
{message}

---
This email was sent from the Easy Plant Life contact form.
"""
