# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grade calculator for GPA, academic status and credit limits.

All thresholds live in ordered rule tables. Each table is evaluated
highest threshold first and the first row whose minimum GPA is met wins,
so every band boundary is inclusive on its lower edge.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from academic_records.domains.exceptions import InvalidArgumentError
from academic_records.models.academic import AcademicStatus, CourseGrade

logger = logging.getLogger(__name__)

MIN_GPA = 0.0
MAX_GPA = 4.0
GPA_PRECISION = 2


@dataclass(frozen=True)
class SemesterBand:
    """Academic status rules for semesters starting at first_semester.

    Attributes:
        first_semester: First semester the band applies to.
        rules: (min_gpa, status) pairs, highest min_gpa first.
    """

    first_semester: int
    rules: tuple[tuple[float, AcademicStatus], ...]


# Highest first_semester first
STATUS_RULES: tuple[SemesterBand, ...] = (
    SemesterBand(
        first_semester=5,
        rules=(
            (2.5, AcademicStatus.ACTIVE),
            (2.0, AcademicStatus.PROBATION),
            (MIN_GPA, AcademicStatus.SUSPENDED),
        ),
    ),
    SemesterBand(
        first_semester=3,
        rules=(
            (2.25, AcademicStatus.ACTIVE),
            (2.0, AcademicStatus.PROBATION),
            (MIN_GPA, AcademicStatus.SUSPENDED),
        ),
    ),
    SemesterBand(
        first_semester=1,
        rules=(
            (2.0, AcademicStatus.ACTIVE),
            (MIN_GPA, AcademicStatus.PROBATION),
        ),
    ),
)

# (min_gpa, max_credits), highest min_gpa first
CREDIT_LIMIT_RULES: tuple[tuple[float, int], ...] = (
    (3.5, 24),
    (2.6, 21),
    (2.2, 18),
    (MIN_GPA, 15),
)


def _check_gpa(gpa: float) -> None:
    if gpa < MIN_GPA or gpa > MAX_GPA:
        raise InvalidArgumentError(
            f"GPA must be between {MIN_GPA} and {MAX_GPA}",
            {"gpa": gpa},
        )


def grade_point_average(grades: Iterable[CourseGrade]) -> float:
    """Compute the unrounded credit-weighted grade point average.

    Args:
        grades: Graded courses.

    Returns:
        Weighted mean of grade points, or 0.0 when there are no credits.

    Raises:
        InvalidArgumentError: If a grade point is outside [0.0, 4.0].
    """
    total_points = 0.0
    total_credits = 0

    for grade in grades:
        if grade.grade_point < MIN_GPA or grade.grade_point > MAX_GPA:
            raise InvalidArgumentError(
                f"Grade point must be between {MIN_GPA} and {MAX_GPA}",
                {"course_code": grade.course_code, "grade_point": grade.grade_point},
            )
        total_points += grade.grade_point * grade.credit_hours
        total_credits += grade.credit_hours

    if total_credits == 0:
        return 0.0

    return total_points / total_credits


class GradeCalculator:
    """Stateless calculator for grade-derived academic rules."""

    def calculate_gpa(self, grades: Iterable[CourseGrade]) -> float:
        """Calculate GPA weighted by credit hours.

        Args:
            grades: Graded courses. May be empty.

        Returns:
            GPA rounded to two decimals. 0.0 for an empty list or when
            total credit hours are zero.

        Raises:
            InvalidArgumentError: If any grade point exceeds 4.0 or is negative.
        """
        return round(grade_point_average(grades), GPA_PRECISION)

    def determine_academic_status(self, gpa: float, semester: int) -> AcademicStatus:
        """Determine academic status from GPA and semester.

        Args:
            gpa: Cumulative GPA.
            semester: Current semester, starting at 1.

        Returns:
            The academic status of the first matching rule.

        Raises:
            InvalidArgumentError: If GPA is outside [0.0, 4.0] or semester < 1.
        """
        _check_gpa(gpa)
        if semester < 1:
            raise InvalidArgumentError(
                "Semester must be at least 1",
                {"semester": semester},
            )

        band = next(b for b in STATUS_RULES if semester >= b.first_semester)
        for min_gpa, status in band.rules:
            if gpa >= min_gpa:
                return status

        return band.rules[-1][1]

    def calculate_max_credits(self, gpa: float) -> int:
        """Calculate the maximum credits a student may take in a semester.

        Args:
            gpa: Cumulative GPA.

        Returns:
            Credit cap for the GPA band.

        Raises:
            InvalidArgumentError: If GPA is outside [0.0, 4.0].
        """
        _check_gpa(gpa)

        for min_gpa, max_credits in CREDIT_LIMIT_RULES:
            if gpa >= min_gpa:
                return max_credits

        return CREDIT_LIMIT_RULES[-1][1]
