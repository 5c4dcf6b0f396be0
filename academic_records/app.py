# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application factory.

Wires settings, logging, the email notifier and the repositories into a
ready-to-use EnrollmentService.
"""

import logging

from academic_records.core.config import Settings, get_settings
from academic_records.domains.enrollment import (
    CourseRepository,
    EnrollmentService,
    StudentRepository,
)
from academic_records.infrastructure.notifications import EmailChannel, EmailNotificationService
from academic_records.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_enrollment_service(
    student_repository: StudentRepository,
    course_repository: CourseRepository,
    settings: Settings | None = None,
) -> EnrollmentService:
    """Create and configure the enrollment service.

    Configures logging from the settings before anything else logs, then
    builds an email notifier from the SMTP settings.

    Args:
        student_repository: Student lookup.
        course_repository: Course lookup and persistence.
        settings: Application settings. Cached settings when omitted.

    Returns:
        Configured EnrollmentService instance.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    logger.info(
        "Starting Academic Records (environment=%s, smtp_configured=%s)",
        settings.environment,
        settings.smtp.is_configured,
    )

    notifier = EmailNotificationService(EmailChannel(settings.smtp))

    return EnrollmentService(
        student_repository=student_repository,
        course_repository=course_repository,
        notification_service=notifier,
    )
