# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Academic record models.

Pydantic models for the records the enrollment and grading domains
operate on: students, courses, course grades and enrollments.

Student and Course are mutable; assignments are validated so that
the GPA range and seat capacity constraints hold after every change.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AcademicStatus(str, Enum):
    """Academic standing of a student."""

    ACTIVE = "ACTIVE"
    PROBATION = "PROBATION"
    SUSPENDED = "SUSPENDED"


class Student(BaseModel):
    """A student record.

    Attributes:
        id: Student identifier.
        name: Full name.
        email: Contact email used for notifications.
        program: Study program.
        semester: Current semester, starting at 1.
        gpa: Cumulative grade-point average in [0.0, 4.0].
        academic_status: Current academic standing.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str
    email: str
    program: str
    semester: int = Field(ge=1)
    gpa: float = Field(ge=0.0, le=4.0)
    academic_status: AcademicStatus = AcademicStatus.ACTIVE

    @property
    def is_suspended(self) -> bool:
        """Check if the student is suspended."""
        return self.academic_status == AcademicStatus.SUSPENDED


class Course(BaseModel):
    """A course offering with a fixed number of seats.

    Attributes:
        course_code: Unique course code (e.g. CS101).
        name: Course title.
        credit_hours: Credit weight of the course.
        capacity: Maximum number of enrolled students.
        enrolled_count: Students currently enrolled.
        instructor: Teaching instructor.
        prerequisites: Course codes that must be completed first.
    """

    model_config = ConfigDict(validate_assignment=True)

    course_code: str
    name: str
    credit_hours: int = Field(ge=0)
    capacity: int = Field(ge=0)
    enrolled_count: int = Field(default=0, ge=0)
    instructor: str
    prerequisites: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_capacity(self) -> Self:
        """Reject enrollment counts above capacity."""
        if self.enrolled_count > self.capacity:
            raise ValueError(
                f"enrolled_count ({self.enrolled_count}) exceeds capacity ({self.capacity})"
            )
        return self

    @property
    def is_full(self) -> bool:
        """Check if every seat is taken."""
        return self.enrolled_count >= self.capacity

    @property
    def available_seats(self) -> int:
        """Number of seats still open."""
        return max(self.capacity - self.enrolled_count, 0)


class CourseGrade(BaseModel):
    """A graded course on a transcript.

    The grade point is not range checked here; GradeCalculator
    rejects values outside [0.0, 4.0].
    """

    course_code: str
    credit_hours: int = Field(ge=0)
    grade_point: float


class Enrollment(BaseModel):
    """A student's enrollment in a course."""

    student_id: str
    course_code: str
    enrolled_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
