# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for Academic Records."""

from academic_records.models.academic import (
    AcademicStatus,
    Course,
    CourseGrade,
    Enrollment,
    Student,
)

__all__ = [
    "AcademicStatus",
    "Course",
    "CourseGrade",
    "Enrollment",
    "Student",
]
