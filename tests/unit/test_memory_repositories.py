# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the in-memory repositories."""

from unittest.mock import MagicMock

import pytest

from academic_records.domains.enrollment import EnrollmentService, PrerequisiteNotMetError
from academic_records.infrastructure.repositories import (
    InMemoryCourseRepository,
    InMemoryStudentRepository,
)
from academic_records.models.academic import Course, Student


@pytest.fixture
def student():
    """Create a sample student."""
    return Student(
        id="S1",
        name="Belva",
        email="belva@mail.com",
        program="Informatika",
        semester=5,
        gpa=3.4,
    )


@pytest.fixture
def students(student):
    """Create a student repository holding one student."""
    return InMemoryStudentRepository([student])


@pytest.fixture
def courses(students):
    """Create a course repository with an intro course and a follow-up."""
    return InMemoryCourseRepository(
        students,
        [
            Course(course_code="CS101", name="Algoritma", credit_hours=3, capacity=30, instructor="Dosen A"),
            Course(
                course_code="CS201",
                name="Struktur Data",
                credit_hours=3,
                capacity=25,
                instructor="Dosen B",
                prerequisites=["CS101"],
            ),
        ],
    )


class TestInMemoryStudentRepository:
    """Tests for the student repository."""

    def test_find_by_id(self, students, student):
        """Test lookup returns the stored student."""
        assert students.find_by_id("S1") is student

    def test_find_missing_returns_none(self, students):
        """Test lookup of an unknown ID returns None."""
        assert students.find_by_id("S404") is None

    def test_completed_courses(self, students):
        """Test completed courses are tracked per student."""
        students.record_completed_course("S1", "CS101")
        students.record_completed_course("S1", "MA101")

        assert students.completed_courses("S1") == {"CS101", "MA101"}
        assert students.completed_courses("S2") == frozenset()


class TestInMemoryCourseRepository:
    """Tests for the course repository."""

    def test_find_by_course_code(self, courses):
        """Test lookup by course code."""
        assert courses.find_by_course_code("CS101").name == "Algoritma"
        assert courses.find_by_course_code("CS999") is None

    def test_no_prerequisites_always_met(self, courses):
        """Test a course without prerequisites is open to everyone."""
        assert courses.is_prerequisite_met("S1", "CS101") is True

    def test_unknown_course_has_no_prerequisites(self, courses):
        """Test the check passes for a course that does not exist."""
        assert courses.is_prerequisite_met("S1", "CS999") is True

    def test_prerequisite_missing(self, courses):
        """Test the check fails until the prerequisite is completed."""
        assert courses.is_prerequisite_met("S1", "CS201") is False

    def test_prerequisite_completed(self, courses, students):
        """Test the check passes once the prerequisite is completed."""
        students.record_completed_course("S1", "CS101")

        assert courses.is_prerequisite_met("S1", "CS201") is True

    def test_update_replaces_stored_course(self, courses):
        """Test update stores the given course under its code."""
        replacement = Course(
            course_code="CS101", name="Algoritma Lanjut", credit_hours=4, capacity=40, instructor="Dosen C"
        )

        courses.update(replacement)

        assert courses.find_by_course_code("CS101") is replacement


class TestEnrollmentWithInMemoryRepositories:
    """Tests for the enrollment workflow against the in-memory stores."""

    @pytest.fixture
    def notification_service(self):
        """Create mock notification service."""
        return MagicMock()

    @pytest.fixture
    def service(self, students, courses, notification_service):
        """Create enrollment service backed by in-memory repositories."""
        return EnrollmentService(students, courses, notification_service)

    def test_enroll_then_drop(self, service, courses, notification_service):
        """Test counts move up on enroll and back down on drop."""
        service.enroll_course("S1", "CS101")
        assert courses.find_by_course_code("CS101").enrolled_count == 1

        service.drop_course("S1", "CS101")
        assert courses.find_by_course_code("CS101").enrolled_count == 0

        subjects = [c.args[1] for c in notification_service.send_email.call_args_list]
        assert subjects == ["Enrollment Confirmation", "Course Drop Confirmation"]

    def test_prerequisite_gate(self, service, students, courses):
        """Test the follow-up course opens after the prerequisite is completed."""
        with pytest.raises(PrerequisiteNotMetError):
            service.enroll_course("S1", "CS201")

        students.record_completed_course("S1", "CS101")
        enrollment = service.enroll_course("S1", "CS201")

        assert enrollment.course_code == "CS201"
        assert courses.find_by_course_code("CS201").enrolled_count == 1
