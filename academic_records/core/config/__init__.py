# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for Academic Records.

Example:
    >>> from academic_records.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.smtp.is_configured
    False
"""

from academic_records.core.config.settings import (
    Settings,
    SMTPSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "SMTPSettings",
    "get_settings",
    "clear_settings_cache",
]
