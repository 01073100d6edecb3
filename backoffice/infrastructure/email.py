"""Transactional email delivery via SendGrid with Jinja2 templates."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from backoffice.config import Settings
from backoffice.domain.entities import User
from backoffice.infrastructure.rendering import render_email

logger = logging.getLogger(__name__)

RESET_PASSWORD_TEMPLATE = "reset-password"
ACCOUNT_CREATED_SUBJECT = "Account created - set your password"
RESET_PASSWORD_SUBJECT = "Reset password - your account"


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages = [
                str(item["message"])
                for item in errors
                if isinstance(item, dict) and item.get("message")
            ]
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    return str(parsed)


def _log_sendgrid_failure(source: Any) -> None:
    """Log a failed SendGrid exchange, whether an exception or a response."""

    status_code = getattr(source, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(source, "body", None))

    if status_code and details:
        logger.error("SendGrid API request failed with status %s: %s", status_code, details)
    elif status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid API request failed: %s", details)
    else:
        logger.error("SendGrid API request failed: %r", source)


def send_email(settings: Settings, subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` instead of raising when delivery is not configured or
    SendGrid rejects the message; callers decide whether that is fatal.
    """

    if not settings.email_enabled:
        logger.info("SendGrid configuration incomplete; skipping email to %s", recipient)
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_sendgrid_failure(exc)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_sendgrid_failure(response)
        return False

    return True


def send_templated_email(
    settings: Settings,
    *,
    to: str,
    subject: str,
    template: str,
    context: Mapping[str, Any],
) -> bool:
    """Render ``template`` with ``context`` and deliver it to ``to``."""

    try:
        html_content = render_email(template, **context)
    except Exception:
        logger.exception("Could not render the %s email for %s", template, to)
        return False
    return send_email(settings, subject, html_content, to)


def build_reset_link(settings: Settings, token: str) -> str:
    return f"{settings.base_url.rstrip('/')}/reset-password?token={token}"


def send_reset_password_email(
    settings: Settings, user: User, token: str, *, subject: str = RESET_PASSWORD_SUBJECT
) -> bool:
    """Send the "set your password" message carrying a reset link for ``user``."""

    return send_templated_email(
        settings,
        to=user.email,
        subject=subject,
        template=RESET_PASSWORD_TEMPLATE,
        context={
            "username": user.username,
            "fullname": user.fullname,
            "logo_url": settings.mail_logo_url,
            "verification_link": build_reset_link(settings, token),
        },
    )


__all__ = [
    "ACCOUNT_CREATED_SUBJECT",
    "RESET_PASSWORD_SUBJECT",
    "build_reset_link",
    "send_email",
    "send_reset_password_email",
    "send_templated_email",
]
