# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for Academic Records.

This package contains domain services that encapsulate business logic.
Each domain module provides services that orchestrate operations
across repositories and external services.

Domains:
    grading: GPA, academic status and credit limit computation.
    enrollment: Course enrollment and drop workflows.
"""
