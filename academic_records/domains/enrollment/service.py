# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment service for managing student course enrollments.

This module provides the EnrollmentService class for:
- Student enrollment in courses
- Course drops
- Credit load validation against the GPA-derived limit
"""

from __future__ import annotations

import logging

from academic_records.domains.enrollment.ports import (
    CourseRepository,
    NotificationService,
    StudentRepository,
)
from academic_records.domains.exceptions import (
    CourseFullError,
    CourseNotFoundError,
    EnrollmentError,
    PrerequisiteNotMetError,
    StudentNotFoundError,
)
from academic_records.domains.grading import GradeCalculator
from academic_records.models.academic import Course, Enrollment, Student

logger = logging.getLogger(__name__)

ENROLLMENT_SUBJECT = "Enrollment Confirmation"
DROP_SUBJECT = "Course Drop Confirmation"


class EnrollmentService:
    """Service for managing student enrollments.

    Validation failures are raised to the caller; nothing is persisted
    or sent for a rejected operation.

    Attributes:
        student_repository: Student lookup.
        course_repository: Course lookup, prerequisite check and persistence.
        notification_service: Email delivery.
        grade_calculator: Grade-derived rules.
    """

    def __init__(
        self,
        student_repository: StudentRepository,
        course_repository: CourseRepository,
        notification_service: NotificationService,
        grade_calculator: GradeCalculator | None = None,
    ) -> None:
        """Initialize enrollment service.

        Args:
            student_repository: Student lookup.
            course_repository: Course lookup and persistence.
            notification_service: Email delivery.
            grade_calculator: Grade rules, a default calculator when omitted.
        """
        self.student_repository = student_repository
        self.course_repository = course_repository
        self.notification_service = notification_service
        self.grade_calculator = grade_calculator or GradeCalculator()

    def enroll_course(self, student_id: str, course_code: str) -> Enrollment:
        """Enroll a student in a course.

        Args:
            student_id: Student identifier.
            course_code: Course code.

        Returns:
            The created enrollment.

        Raises:
            StudentNotFoundError: If student not found.
            EnrollmentError: If student is suspended.
            CourseNotFoundError: If course not found.
            CourseFullError: If course has no seats left.
            PrerequisiteNotMetError: If prerequisites are not completed.
        """
        student = self._get_student(student_id)

        if student.is_suspended:
            logger.warning(
                "Enrollment rejected, student suspended: student=%s, course=%s",
                student_id,
                course_code,
            )
            raise EnrollmentError(
                f"Student {student_id} is suspended and cannot enroll",
                {"student_id": student_id, "academic_status": student.academic_status.value},
            )

        course = self._get_course(course_code)

        if course.is_full:
            logger.warning(
                "Enrollment rejected, course full: student=%s, course=%s, capacity=%d",
                student_id,
                course_code,
                course.capacity,
            )
            raise CourseFullError(course_code, course.capacity)

        if not self.course_repository.is_prerequisite_met(student_id, course_code):
            logger.warning(
                "Enrollment rejected, prerequisites not met: student=%s, course=%s",
                student_id,
                course_code,
            )
            raise PrerequisiteNotMetError(student_id, course_code)

        enrollment = Enrollment(student_id=student_id, course_code=course_code)
        course.enrolled_count += 1
        self.course_repository.update(course)

        self.notification_service.send_email(
            student.email,
            ENROLLMENT_SUBJECT,
            f"Dear {student.name}, you have been enrolled in {course.name} ({course.course_code}).",
        )

        logger.info(
            "Enrolled student: student=%s, course=%s, enrolled=%d/%d",
            student_id,
            course_code,
            course.enrolled_count,
            course.capacity,
        )

        return enrollment

    def validate_credit_limit(self, student_id: str, requested_credits: int) -> bool:
        """Check a requested credit load against the student's GPA-derived limit.

        Args:
            student_id: Student identifier.
            requested_credits: Total credits the student wants to take.

        Returns:
            True if the load is within the limit.

        Raises:
            StudentNotFoundError: If student not found.
        """
        student = self._get_student(student_id)
        max_credits = self.grade_calculator.calculate_max_credits(student.gpa)

        within_limit = requested_credits <= max_credits
        logger.debug(
            "Credit limit check: student=%s, requested=%d, max=%d, ok=%s",
            student_id,
            requested_credits,
            max_credits,
            within_limit,
        )
        return within_limit

    def drop_course(self, student_id: str, course_code: str) -> None:
        """Drop a student from a course.

        Args:
            student_id: Student identifier.
            course_code: Course code.

        Raises:
            StudentNotFoundError: If student not found.
            CourseNotFoundError: If course not found.
        """
        student = self._get_student(student_id)
        course = self._get_course(course_code)

        if course.enrolled_count > 0:
            course.enrolled_count -= 1
        self.course_repository.update(course)

        self.notification_service.send_email(
            student.email,
            DROP_SUBJECT,
            f"Dear {student.name}, you have dropped {course.name} ({course.course_code}).",
        )

        logger.info(
            "Dropped course: student=%s, course=%s, enrolled=%d/%d",
            student_id,
            course_code,
            course.enrolled_count,
            course.capacity,
        )

    def _get_student(self, student_id: str) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If not found.
        """
        student = self.student_repository.find_by_id(student_id)
        if student is None:
            logger.warning("Student not found: student=%s", student_id)
            raise StudentNotFoundError(student_id)
        return student

    def _get_course(self, course_code: str) -> Course:
        """Get course by code.

        Raises:
            CourseNotFoundError: If not found.
        """
        course = self.course_repository.find_by_course_code(course_code)
        if course is None:
            logger.warning("Course not found: course=%s", course_code)
            raise CourseNotFoundError(course_code)
        return course
