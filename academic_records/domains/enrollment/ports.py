# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Collaborator interfaces consumed by the enrollment service."""

from typing import Any, Protocol

from academic_records.models.academic import Course, Student


class StudentRepository(Protocol):
    """Student lookup by identifier."""

    def find_by_id(self, student_id: str) -> Student | None:
        """Return the student, or None if absent."""
        ...


class CourseRepository(Protocol):
    """Course lookup, prerequisite check and persistence."""

    def find_by_course_code(self, course_code: str) -> Course | None:
        """Return the course, or None if absent."""
        ...

    def is_prerequisite_met(self, student_id: str, course_code: str) -> bool:
        """Check whether the student completed every prerequisite of the course."""
        ...

    def update(self, course: Course) -> None:
        """Persist changes to a course."""
        ...


class NotificationService(Protocol):
    """Outbound email notification."""

    def send_email(self, to: str, subject: str, body: str) -> Any:
        """Send an email to a single recipient."""
        ...
