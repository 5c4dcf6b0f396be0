# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Infrastructure layer for external collaborators.

This package contains adapters for:
- Notifications (email over SMTP)
- Repositories (in-memory student and course stores)
"""
