# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grading domain package.

This package provides grade-derived academic rules:
- GPA weighted by credit hours
- Academic status by GPA and semester band
- Maximum credit load by GPA band
"""

from academic_records.domains.grading.calculator import (
    CREDIT_LIMIT_RULES,
    STATUS_RULES,
    GradeCalculator,
    SemesterBand,
    grade_point_average,
)

__all__ = [
    "GradeCalculator",
    "SemesterBand",
    "STATUS_RULES",
    "CREDIT_LIMIT_RULES",
    "grade_point_average",
]
