# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Notification system for Academic Records.

Delivers enrollment and drop confirmations to students by email.

Usage:
    from academic_records.infrastructure.notifications import (
        get_notification_service,
    )

    service = get_notification_service()
    result = service.send_email(
        "student@university.edu",
        "Enrollment Confirmation",
        "You have been enrolled in Algorithms (CS101).",
    )

Configuration (environment variables):
- SMTP_HOST: SMTP server hostname
- SMTP_PORT: SMTP server port (default: 587)
- SMTP_USERNAME: SMTP authentication username
- SMTP_PASSWORD: SMTP authentication password
- SMTP_FROM_EMAIL: Sender email address
- SMTP_FROM_NAME: Sender display name
"""

from academic_records.infrastructure.notifications.channels import (
    ChannelResult,
    DeliveryStatus,
    EmailChannel,
    NotificationPayload,
)
from academic_records.infrastructure.notifications.service import (
    EmailNotificationService,
    get_notification_service,
    reset_notification_service,
)

__all__ = [
    "EmailNotificationService",
    "get_notification_service",
    "reset_notification_service",
    "ChannelResult",
    "DeliveryStatus",
    "NotificationPayload",
    "EmailChannel",
]
