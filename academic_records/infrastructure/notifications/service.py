# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Email notification service used by the enrollment workflow.

Bridges the synchronous enrollment service to the async email channel.
Outside an event loop send_email() runs the channel send to completion.
Inside a running loop (an async web handler, for example) the send is
scheduled on that loop and a QUEUED result is returned at once.

Delivery problems are logged and returned, never raised, so a mail
outage cannot roll back an enrollment that was already persisted.
"""

import asyncio
import functools
import logging

from academic_records.core.config.settings import SMTPSettings, get_settings
from academic_records.infrastructure.notifications.channels import (
    ChannelResult,
    DeliveryStatus,
    EmailChannel,
    NotificationPayload,
)

logger = logging.getLogger(__name__)


class EmailNotificationService:
    """Synchronous email notifier.

    Attributes:
        channel: Email channel used for delivery.
    """

    def __init__(self, channel: EmailChannel) -> None:
        """Initialize the notification service.

        Args:
            channel: Email channel used for delivery.
        """
        self.channel = channel
        # Strong references to scheduled sends until they finish
        self._pending: set[asyncio.Task[ChannelResult]] = set()

    def send_email(self, to: str, subject: str, body: str) -> ChannelResult:
        """Send an email to a single recipient.

        Args:
            to: Recipient email address.
            subject: Email subject.
            body: Plain text message body.

        Returns:
            ChannelResult with delivery status. QUEUED when called from
            inside a running event loop.
        """
        payload = NotificationPayload(
            title=subject,
            message=body,
            recipient_email=to,
        )

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(self.channel.send(payload))
            self._pending.add(task)
            task.add_done_callback(functools.partial(self._on_sent, to))
            logger.debug("Email to %s queued on the running event loop", to)
            return ChannelResult(
                status=DeliveryStatus.QUEUED,
                metadata={"recipient": to},
            )

        result = asyncio.run(self.channel.send(payload))
        self._log_result(result, to)
        return result

    async def drain(self) -> list[ChannelResult]:
        """Wait for every queued send to finish.

        Returns:
            Results of the sends that were pending.
        """
        if not self._pending:
            return []
        return list(await asyncio.gather(*self._pending))

    def _on_sent(self, to: str, task: "asyncio.Task[ChannelResult]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.warning("Queued email send was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Queued email send raised: %s", exc, exc_info=exc)
            return
        self._log_result(task.result(), to)

    @staticmethod
    def _log_result(result: ChannelResult, to: str) -> None:
        if result.status == DeliveryStatus.FAILED:
            logger.error("Email to %s failed: %s", to, result.error_message)
        elif result.status == DeliveryStatus.SKIPPED:
            logger.info("Email to %s skipped: %s", to, result.error_message)


_service_instance: EmailNotificationService | None = None


def get_notification_service(
    settings: SMTPSettings | None = None,
) -> EmailNotificationService:
    """Get or create the notification service singleton.

    Args:
        settings: SMTP settings, application settings when omitted.

    Returns:
        EmailNotificationService instance.
    """
    global _service_instance
    if _service_instance is None:
        smtp = settings or get_settings().smtp
        _service_instance = EmailNotificationService(EmailChannel(smtp))
    return _service_instance


def reset_notification_service() -> None:
    """Drop the cached notification service."""
    global _service_instance
    _service_instance = None
