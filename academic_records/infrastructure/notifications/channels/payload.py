# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Email payload and delivery result types."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class DeliveryStatus(str, Enum):
    """Outcome of an email delivery attempt."""

    SENT = "sent"
    QUEUED = "queued"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class NotificationPayload:
    """A single email to a student.

    Attributes:
        title: Email subject.
        message: Plain text body.
        recipient_email: Student email address.
    """

    title: str
    message: str
    recipient_email: str


@dataclass
class ChannelResult:
    """Result of an email delivery attempt.

    Attributes:
        status: Delivery status.
        message_id: SMTP Message-ID when sent.
        error_message: Reason for a failed or skipped send.
        sent_at: When the result was produced.
        metadata: Extra details such as the recipient.
    """

    status: DeliveryStatus
    message_id: str | None = None
    error_message: str | None = None
    sent_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_sent(self) -> bool:
        return self.status == DeliveryStatus.SENT

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for logging."""
        return {
            "status": self.status.value,
            "message_id": self.message_id,
            "error_message": self.error_message,
            "sent_at": self.sent_at.isoformat(),
            "metadata": self.metadata,
        }
