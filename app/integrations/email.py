from __future__ import annotations

import logging
import smtplib
import ssl
from email.message import EmailMessage

from app.core.config import settings

logger = logging.getLogger(__name__)


def _smtp_ready() -> bool:
    return bool(settings.smtp_host and settings.admin_notify_email)


def _smtp_password() -> str | None:
    if not settings.smtp_password:
        return None
    # Gmail app passwords are often copied with spaces every 4 chars.
    return settings.smtp_password.replace(" ", "")


def _send(msg: EmailMessage) -> None:
    context = ssl.create_default_context()
    host = settings.smtp_host or ""
    if settings.smtp_use_tls:
        with smtplib.SMTP(host, settings.smtp_port, timeout=15) as server:
            server.starttls(context=context)
            if settings.smtp_user and _smtp_password():
                server.login(settings.smtp_user, _smtp_password())
            server.send_message(msg)
        return

    with smtplib.SMTP_SSL(host, settings.smtp_port, context=context, timeout=15) as server:
        if settings.smtp_user and _smtp_password():
            server.login(settings.smtp_user, _smtp_password())
        server.send_message(msg)


def send_contact_notice(name: str, email: str, subject: str | None, message: str) -> bool:
    if not _smtp_ready():
        logger.info("Contact email notification is not configured; skipping.")
        return False

    recipient = settings.admin_notify_email
    msg = EmailMessage()
    msg["Subject"] = f"Portfolio contact: {subject or 'No subject'}"
    msg["From"] = settings.smtp_from or settings.smtp_user or recipient
    msg["To"] = recipient
    msg["Reply-To"] = email
    msg.set_content(f"Name: {name}\nEmail: {email}\nSubject: {subject or 'No subject'}\n\n{message}".strip())

    try:
        _send(msg)
        return True
    except Exception as exc:  # noqa: BLE001 - contact form must still succeed
        logger.exception(
            "Contact email via SMTP failed (host=%s port=%s): %s",
            settings.smtp_host,
            settings.smtp_port,
            exc,
        )
        return False
