# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Repository implementations for students and courses."""

from academic_records.infrastructure.repositories.memory import (
    InMemoryCourseRepository,
    InMemoryStudentRepository,
)

__all__ = [
    "InMemoryCourseRepository",
    "InMemoryStudentRepository",
]
