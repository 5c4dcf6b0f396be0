# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment domain package.

This package provides course enrollment management functionality including:
- Student enrollment in courses
- Course drops
- Credit load validation
"""

from academic_records.domains.enrollment.ports import (
    CourseRepository,
    NotificationService,
    StudentRepository,
)
from academic_records.domains.enrollment.service import (
    DROP_SUBJECT,
    ENROLLMENT_SUBJECT,
    EnrollmentService,
)
from academic_records.domains.exceptions import (
    CourseFullError,
    CourseNotFoundError,
    EnrollmentError,
    PrerequisiteNotMetError,
    StudentNotFoundError,
)

__all__ = [
    "EnrollmentService",
    "ENROLLMENT_SUBJECT",
    "DROP_SUBJECT",
    "StudentRepository",
    "CourseRepository",
    "NotificationService",
    "EnrollmentError",
    "StudentNotFoundError",
    "CourseNotFoundError",
    "CourseFullError",
    "PrerequisiteNotMetError",
]
