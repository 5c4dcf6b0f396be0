# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Email notification channel using async SMTP.

This channel sends email notifications using aiosmtplib. Each message
carries both a plain text and an HTML part.

Configuration comes from SMTPSettings (SMTP_* environment variables).
"""

import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid

import aiosmtplib

from academic_records.core.config.settings import SMTPSettings
from academic_records.infrastructure.notifications.channels.payload import (
    ChannelResult,
    DeliveryStatus,
    NotificationPayload,
)

logger = logging.getLogger(__name__)

FOOTER = "This notification was sent by the Academic Records office."


class EmailChannel:
    """Email notification channel using async SMTP.

    Sends are skipped, not failed, when SMTP is not configured or the
    payload has no recipient.
    """

    def __init__(self, settings: SMTPSettings) -> None:
        """Initialize the email channel.

        Args:
            settings: SMTP connection and sender settings.
        """
        self.settings = settings

    async def send(self, payload: NotificationPayload) -> ChannelResult:
        """Send email notification via SMTP.

        Args:
            payload: The notification payload.

        Returns:
            ChannelResult with delivery status.
        """
        recipient = {"recipient": payload.recipient_email}

        if not self.settings.is_configured:
            logger.warning(
                "Email notifications disabled: SMTP_HOST, SMTP_USERNAME, "
                "SMTP_PASSWORD, or SMTP_FROM_EMAIL not set"
            )
            return ChannelResult(
                status=DeliveryStatus.SKIPPED,
                error_message="SMTP configuration incomplete",
                metadata=recipient,
            )

        if not payload.recipient_email:
            return ChannelResult(
                status=DeliveryStatus.SKIPPED,
                error_message="No recipient email address",
            )

        message = self._build_email_message(payload)

        try:
            await aiosmtplib.send(
                message,
                hostname=self.settings.host,
                port=self.settings.port,
                username=self.settings.username,
                password=self.settings.password.get_secret_value(),
                start_tls=self.settings.use_tls,
                timeout=self.settings.timeout,
            )
        except aiosmtplib.SMTPException as e:
            logger.error(
                "Failed to send email to %s: %s",
                payload.recipient_email,
                str(e),
                exc_info=True,
            )
            return ChannelResult(
                status=DeliveryStatus.FAILED,
                error_message=f"SMTP error: {e}",
                metadata=recipient,
            )

        logger.info("Email sent to %s: %s", payload.recipient_email, payload.title)

        return ChannelResult(
            status=DeliveryStatus.SENT,
            message_id=message["Message-ID"],
            metadata=recipient,
        )

    def _build_email_message(self, payload: NotificationPayload) -> MIMEMultipart:
        """Build MIME email message.

        Args:
            payload: Notification payload.

        Returns:
            MIMEMultipart message ready to send.
        """
        message = MIMEMultipart("alternative")

        message["From"] = formataddr((self.settings.from_name, self.settings.from_email))
        message["To"] = payload.recipient_email
        message["Subject"] = payload.title
        message["Message-ID"] = make_msgid(domain=self.settings.host)

        message.attach(MIMEText(self._build_plain_text(payload), "plain", "utf-8"))
        message.attach(MIMEText(self._build_html(payload), "html", "utf-8"))

        return message

    def _build_plain_text(self, payload: NotificationPayload) -> str:
        lines = [
            payload.title,
            "=" * len(payload.title),
            "",
            payload.message,
            "",
            "---",
            FOOTER,
        ]
        return "\n".join(lines)

    def _build_html(self, payload: NotificationPayload) -> str:
        title = html.escape(payload.title)
        message = html.escape(payload.message).replace("\n", "<br>")

        body = f"""
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #1F2937;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #4F46E5; font-size: 22px;">{title}</h1>
        <p>{message}</p>
        <p style="border-top: 1px solid #E5E7EB; padding-top: 12px;
                  font-size: 12px; color: #9CA3AF;">{FOOTER}</p>
    </div>
</body>
</html>
        """

        return body.strip()
