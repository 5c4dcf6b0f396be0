# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for the academic records domains.

This module defines the exception hierarchy:
- AcademicRecordsError: Base exception for all domain errors
- InvalidArgumentError: Bad GPA, semester, grade point or credit input
- EnrollmentError: Enrollment rule violation (e.g. suspended student)
- StudentNotFoundError, CourseNotFoundError: Missing records
- CourseFullError: No seats left
- PrerequisiteNotMetError: Required prior courses not completed
"""


class AcademicRecordsError(Exception):
    """Base exception for all academic records errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Initialize academic records error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class InvalidArgumentError(AcademicRecordsError, ValueError):
    """Raised when grade computation receives out-of-range input."""

    pass


class EnrollmentError(AcademicRecordsError):
    """Raised when an enrollment rule is violated."""

    pass


class StudentNotFoundError(EnrollmentError):
    """Raised when student is not found."""

    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"Student {student_id} not found", {"student_id": student_id})


class CourseNotFoundError(EnrollmentError):
    """Raised when course is not found."""

    def __init__(self, course_code: str):
        self.course_code = course_code
        super().__init__(f"Course {course_code} not found", {"course_code": course_code})


class CourseFullError(EnrollmentError):
    """Raised when a course has no seats left."""

    def __init__(self, course_code: str, capacity: int):
        self.course_code = course_code
        self.capacity = capacity
        super().__init__(
            f"Course {course_code} is full",
            {"course_code": course_code, "capacity": capacity},
        )


class PrerequisiteNotMetError(EnrollmentError):
    """Raised when the student has not completed the course prerequisites."""

    def __init__(self, student_id: str, course_code: str):
        self.student_id = student_id
        self.course_code = course_code
        super().__init__(
            f"Prerequisites for {course_code} not met",
            {"student_id": student_id, "course_code": course_code},
        )
