# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Notification channels for delivering notifications.

Usage:
    from academic_records.infrastructure.notifications.channels import (
        EmailChannel,
        NotificationPayload,
    )

    email = EmailChannel(get_settings().smtp)
    payload = NotificationPayload(
        title="Enrollment Confirmation",
        message="You have been enrolled in Algorithms.",
        recipient_email="student@university.edu",
    )

    result = await email.send(payload)
"""

from academic_records.infrastructure.notifications.channels.email import EmailChannel
from academic_records.infrastructure.notifications.channels.payload import (
    ChannelResult,
    DeliveryStatus,
    NotificationPayload,
)

__all__ = [
    "ChannelResult",
    "DeliveryStatus",
    "NotificationPayload",
    "EmailChannel",
]
