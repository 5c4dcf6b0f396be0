"""Academic Records.

Enrollment rules and grade computation for a university academic-records
system: prerequisites, capacity, credit limits, GPA and academic status.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
