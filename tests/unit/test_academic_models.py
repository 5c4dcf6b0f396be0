# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for academic record models."""

from datetime import timezone

import pytest
from pydantic import ValidationError

from academic_records.models.academic import (
    AcademicStatus,
    Course,
    CourseGrade,
    Enrollment,
    Student,
)


def _course(**overrides) -> Course:
    data = {
        "course_code": "CS101",
        "name": "Algoritma",
        "credit_hours": 3,
        "capacity": 30,
        "enrolled_count": 10,
        "instructor": "Dosen A",
    }
    data.update(overrides)
    return Course(**data)


def _student(**overrides) -> Student:
    data = {
        "id": "S1",
        "name": "Belva",
        "email": "belva@mail.com",
        "program": "Informatika",
        "semester": 3,
        "gpa": 3.2,
    }
    data.update(overrides)
    return Student(**data)


class TestStudent:
    """Tests for the Student model."""

    def test_defaults_to_active(self):
        """Test new students are active."""
        student = _student()

        assert student.academic_status == AcademicStatus.ACTIVE
        assert not student.is_suspended

    def test_status_accepts_plain_string(self):
        """Test status can be given by name."""
        student = _student(academic_status="SUSPENDED")

        assert student.academic_status is AcademicStatus.SUSPENDED
        assert student.is_suspended

    def test_status_is_mutable(self):
        """Test status can be reassigned."""
        student = _student()
        student.academic_status = AcademicStatus.PROBATION

        assert student.academic_status == "PROBATION"

    @pytest.mark.parametrize("gpa", [-0.1, 4.01])
    def test_gpa_out_of_range_rejected(self, gpa):
        """Test GPA must stay within [0, 4]."""
        with pytest.raises(ValidationError):
            _student(gpa=gpa)

    def test_gpa_assignment_validated(self):
        """Test GPA range is enforced on assignment."""
        student = _student()

        with pytest.raises(ValidationError):
            student.gpa = 4.5

    def test_semester_must_be_positive(self):
        """Test semester starts at 1."""
        with pytest.raises(ValidationError):
            _student(semester=0)


class TestCourse:
    """Tests for the Course model."""

    def test_seat_helpers(self):
        """Test seat availability helpers."""
        course = _course()

        assert course.available_seats == 20
        assert not course.is_full
        assert course.prerequisites == []

    def test_full_course(self):
        """Test a course at capacity is full."""
        course = _course(enrolled_count=30)

        assert course.is_full
        assert course.available_seats == 0

    def test_count_above_capacity_rejected(self):
        """Test enrolled count cannot exceed capacity."""
        with pytest.raises(ValidationError):
            _course(enrolled_count=31)

    def test_count_assignment_above_capacity_rejected(self):
        """Test capacity is enforced on assignment."""
        course = _course(enrolled_count=30)

        with pytest.raises(ValidationError):
            course.enrolled_count = 31

    def test_negative_count_rejected(self):
        """Test enrolled count cannot go negative."""
        with pytest.raises(ValidationError):
            _course(enrolled_count=-1)


class TestCourseGradeAndEnrollment:
    """Tests for CourseGrade and Enrollment."""

    def test_grade_point_not_range_checked(self):
        """Test out-of-range grade points are left to the calculator."""
        grade = CourseGrade(course_code="CS101", credit_hours=3, grade_point=5.0)

        assert grade.grade_point == 5.0

    def test_enrollment_timestamp_is_utc(self):
        """Test enrollment records when it was created."""
        enrollment = Enrollment(student_id="S1", course_code="CS101")

        assert enrollment.enrolled_at.tzinfo == timezone.utc
