# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-memory student and course repositories.

Dictionary-backed implementations of the enrollment collaborator
interfaces. Suitable for local runs and service-level tests.
"""

import logging
from collections.abc import Iterable

from academic_records.models.academic import Course, Student

logger = logging.getLogger(__name__)


class InMemoryStudentRepository:
    """Student store keyed by student ID.

    Also tracks the course codes each student has completed, which
    the course repository consults for prerequisite checks.
    """

    def __init__(self, students: Iterable[Student] | None = None) -> None:
        self._students: dict[str, Student] = {}
        self._completed: dict[str, set[str]] = {}
        for student in students or []:
            self.add(student)

    def add(self, student: Student) -> None:
        """Add or replace a student."""
        self._students[student.id] = student

    def find_by_id(self, student_id: str) -> Student | None:
        return self._students.get(student_id)

    def record_completed_course(self, student_id: str, course_code: str) -> None:
        """Mark a course as completed by a student."""
        self._completed.setdefault(student_id, set()).add(course_code)

    def completed_courses(self, student_id: str) -> frozenset[str]:
        """Get the course codes a student has completed."""
        return frozenset(self._completed.get(student_id, ()))


class InMemoryCourseRepository:
    """Course store keyed by course code.

    Attributes:
        student_repository: Source of completed courses for prerequisite checks.
    """

    def __init__(
        self,
        student_repository: InMemoryStudentRepository,
        courses: Iterable[Course] | None = None,
    ) -> None:
        self.student_repository = student_repository
        self._courses: dict[str, Course] = {}
        for course in courses or []:
            self.add(course)

    def add(self, course: Course) -> None:
        """Add or replace a course."""
        self._courses[course.course_code] = course

    def find_by_course_code(self, course_code: str) -> Course | None:
        return self._courses.get(course_code)

    def is_prerequisite_met(self, student_id: str, course_code: str) -> bool:
        """Check that every prerequisite of the course is completed.

        An unknown course has no prerequisites, so the check passes.
        """
        course = self._courses.get(course_code)
        if course is None or not course.prerequisites:
            return True

        completed = self.student_repository.completed_courses(student_id)
        missing = [code for code in course.prerequisites if code not in completed]
        if missing:
            logger.debug(
                "Missing prerequisites: student=%s, course=%s, missing=%s",
                student_id,
                course_code,
                missing,
            )
        return not missing

    def update(self, course: Course) -> None:
        self._courses[course.course_code] = course
